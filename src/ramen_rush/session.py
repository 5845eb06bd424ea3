"""In-process facade for the Ramen Rush engine.

Wires the event bus, the world and the systems together and exposes the query and
command surface a presentation layer needs. Every command resolves synchronously; the
returned ``MatchResult`` carries the full replay for animation.
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Sequence

from ramen_rush.components.cursor import Cursor, CursorDirection
from ramen_rush.components.game_state import GameState
from ramen_rush.components.grid import Grid
from ramen_rush.components.grid_cell import GridCell
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.ingredient import IngredientType
from ramen_rush.components.line_match import MatchResult
from ramen_rush.components.order_book import Order, OrderBook
from ramen_rush.constants import GRID_SIZE, MAX_CASCADE_ROUNDS, MAX_ORDERS, PREVIEW_QUEUE_SIZE
from ramen_rush.events.bus import EventBus
from ramen_rush.systems.board_ops import preview_tokens
from ramen_rush.systems.cursor_system import CursorSystem
from ramen_rush.systems.level_system import LevelSystem
from ramen_rush.systems.match_resolution import MatchResolutionSystem
from ramen_rush.utils.session_lookup import get_cursor, get_grid, get_or_create_game_state, get_order_book
from ramen_rush.world import create_world


class GameSession:
    """One player's game: board, orders, counters and the systems that drive them."""

    def __init__(
        self,
        *,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        grid_size: int = GRID_SIZE,
        queue_size: int = PREVIEW_QUEUE_SIZE,
        max_orders: int = MAX_ORDERS,
        max_cascade_rounds: int = MAX_CASCADE_ROUNDS,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        if rng is None:
            rng = random.Random(seed)
        self.world = create_world(
            self.event_bus,
            grid_size=grid_size,
            queue_size=queue_size,
            max_orders=max_orders,
            rng=rng,
        )
        self.level_system = LevelSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(
            self.world,
            self.event_bus,
            max_cascade_rounds=max_cascade_rounds,
        )
        self.cursor_system = CursorSystem(self.world, self.event_bus, self.match_resolution_system)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return get_grid(self.world)

    @property
    def order_book(self) -> OrderBook:
        return get_order_book(self.world)

    @property
    def state(self) -> GameState:
        return get_or_create_game_state(self.world)

    @property
    def cursor(self) -> Cursor:
        return get_cursor(self.world)

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def stars(self) -> int:
        return self.state.stars

    @property
    def coins(self) -> int:
        return self.state.coins

    @property
    def orders(self) -> List[Order]:
        return list(self.order_book.orders)

    @property
    def available_ingredients(self) -> List[IngredientType]:
        return list(self.state.available_ingredients)

    def cell_at(self, position: GridPosition) -> Optional[GridCell]:
        return self.grid.cell_at(position)

    def preview_tokens(self) -> List[Optional[IngredientType]]:
        return preview_tokens(self.grid)

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of everything needed to redraw or resume the session."""
        grid = self.grid
        cursor = self.cursor
        state = self.state
        return {
            "level": state.level,
            "stars": state.stars,
            "coins": state.coins,
            "last_order_stars_earned": state.last_order_stars_earned,
            "available_ingredients": [ingredient.value for ingredient in state.available_ingredients],
            "grid": [
                [cell.ingredient.value if cell.ingredient is not None else None for cell in row]
                for row in grid.cells
            ],
            "selected": [[pos.row, pos.col] for pos in grid.selected_positions()],
            "preview_queues": [[ingredient.value for ingredient in queue] for queue in grid.preview_queues],
            "orders": [
                {"ingredient": order.ingredient.value, "quantity": order.quantity}
                for order in self.order_book
            ],
            "cursor": {
                "row": cursor.position.row,
                "col": cursor.position.col,
                "horizontal": cursor.horizontal,
            },
        }

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> None:
        self.level_system.start_session()

    def start_level(self, level: int) -> None:
        self.level_system.start_level(level)

    def advance_level(self) -> None:
        self.level_system.advance_level()

    def select_line(
        self,
        line: Sequence[GridPosition],
        cursor: Optional[GridPosition] = None,
    ) -> Optional[MatchResult]:
        return self.match_resolution_system.resolve_selection(line, cursor)

    def move_cursor(self, direction: CursorDirection) -> GridPosition:
        return self.cursor_system.move(direction)

    def rotate_cursor(self) -> bool:
        return self.cursor_system.rotate()

    def select_current_line(self) -> Optional[MatchResult]:
        return self.cursor_system.select_current_line()

    def clear_selection(self) -> None:
        self.cursor_system.clear_selection()
