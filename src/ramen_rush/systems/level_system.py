"""Session start and level transitions."""
from __future__ import annotations

import logging

from esper import World

from ramen_rush.components.grid_position import GridPosition
from ramen_rush.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_LEVEL_ADVANCE_REQUEST,
    EVENT_LEVEL_STARTED,
    EVENT_SESSION_START_REQUEST,
    EventBus,
)
from ramen_rush.constants import STARTING_LEVEL
from ramen_rush.systems.board_ops import fill_grid, initialize_preview_queues
from ramen_rush.utils.progression import available_ingredients
from ramen_rush.utils.session_lookup import (
    get_cursor,
    get_grid,
    get_or_create_game_state,
    get_order_book,
    get_world_random,
)

logger = logging.getLogger(__name__)


class LevelSystem:
    """Resets board, orders and preview queues whenever a level begins."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SESSION_START_REQUEST, self._on_session_start)
        self.event_bus.subscribe(EVENT_LEVEL_ADVANCE_REQUEST, self._on_level_advance)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_session_start(self, sender, **payload) -> None:
        self.start_session()

    def _on_level_advance(self, sender, **payload) -> None:
        level = payload.get("level")
        if level is None:
            self.advance_level()
        else:
            self.start_level(int(level))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_session(self) -> None:
        state = get_or_create_game_state(self.world)
        state.stars = 0
        state.coins = 0
        state.last_order_stars_earned = 0
        self.start_level(STARTING_LEVEL)

    def advance_level(self) -> None:
        state = get_or_create_game_state(self.world)
        self.start_level(state.level + 1)

    def start_level(self, level: int) -> None:
        state = get_or_create_game_state(self.world)
        grid = get_grid(self.world)
        order_book = get_order_book(self.world)
        rng = get_world_random(self.world)

        state.level = level
        state.last_order_stars_earned = 0
        state.available_ingredients = available_ingredients(level)
        pool = state.available_ingredients

        order_book.generate_orders(pool, order_book.capacity, rng)
        fill_grid(grid, pool, rng)
        initialize_preview_queues(grid, pool, rng)

        cursor = get_cursor(self.world)
        cursor.position = GridPosition(0, 0)
        cursor.horizontal = True

        logger.debug("Level %d started with %d ingredient kinds", level, len(pool))
        self.event_bus.emit(EVENT_LEVEL_STARTED, level=level, ingredients=list(pool))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="level_started")
