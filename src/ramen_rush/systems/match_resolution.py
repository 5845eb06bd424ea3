from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from esper import World

from ramen_rush.components.grid import Grid
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.ingredient import IngredientType
from ramen_rush.components.line_match import CascadeRound, LineMatch, MatchResult
from ramen_rush.components.order_book import Order, OrderBook
from ramen_rush.constants import MAX_CASCADE_ROUNDS, MIN_CASCADE_RUN_LENGTH, MIN_SELECTION_RUN_LENGTH
from ramen_rush.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CASCADE_COMPLETE,
    EVENT_CASCADE_STEP,
    EVENT_LINE_SELECTED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_REJECTED,
    EVENT_MATCH_RESOLVED,
    EVENT_ORDER_ADDED,
    EVENT_ORDER_FULFILLED,
    EVENT_STARS_EARNED,
)
from ramen_rush.systems.board_ops import apply_gravity, clear_and_apply_gravity, clear_runs, find_all_board_matches, scan_line
from ramen_rush.utils.session_lookup import get_grid, get_or_create_game_state, get_order_book, get_world_random

logger = logging.getLogger(__name__)


class CascadeLimitError(RuntimeError):
    """Cascades kept producing matches past the round cap; match or gravity logic is broken."""


def order_candidates(runs: Sequence[LineMatch], cursor: Optional[GridPosition]) -> List[LineMatch]:
    """Runs under the cursor first, then the remaining runs in line order."""
    if cursor is None:
        return list(runs)
    preferred = [run for run in runs if cursor in run]
    others = [run for run in runs if cursor not in run]
    return preferred + others


def choose_match(
    runs: Sequence[LineMatch],
    order_book: OrderBook,
    cursor: Optional[GridPosition] = None,
) -> Optional[Tuple[LineMatch, Order]]:
    for run in order_candidates(runs, cursor):
        order = order_book.fulfill(run)
        if order is not None:
            return run, order
    return None


def collect_cascades(
    grid: Grid,
    pool: Sequence[IngredientType],
    rng: random.Random,
    *,
    max_rounds: int = MAX_CASCADE_ROUNDS,
) -> List[CascadeRound]:
    """Clear board-wide runs pass by pass until the board is stable.

    Each pass clears every run found together and settles the board once. Passing
    ``max_rounds`` is a logic fault: it raises ``CascadeLimitError`` when assertions are
    enabled and otherwise stops with the rounds collected so far.
    """
    cascades: List[CascadeRound] = []
    while True:
        matches = find_all_board_matches(grid, MIN_CASCADE_RUN_LENGTH)
        if not matches:
            break
        if len(cascades) >= max_rounds:
            logger.error(
                "Cascade limit of %d rounds reached with %d runs still on the board",
                max_rounds,
                len(matches),
            )
            if __debug__:
                raise CascadeLimitError(f"Cascade did not settle within {max_rounds} rounds")
            break
        drops = clear_and_apply_gravity(grid, matches, pool, rng)
        cascades.append(CascadeRound(matches=matches, drops=drops))
        logger.debug("Cascade round %d cleared %d run(s)", len(cascades), len(matches))
    return cascades


def resolve_line_selection(
    grid: Grid,
    order_book: OrderBook,
    pool: Sequence[IngredientType],
    line: Iterable[GridPosition],
    cursor: Optional[GridPosition] = None,
    *,
    rng: random.Random,
    max_cascade_rounds: int = MAX_CASCADE_ROUNDS,
) -> Optional[MatchResult]:
    """Resolve one player line selection against the order book.

    Returns None, leaving board and orders untouched, when no run on the line fulfils an
    order. Otherwise clears the chosen run, settles the board, tops the order book back up
    by one and runs every follow-up cascade before returning.
    """
    positions = list(line)
    if cursor is not None and cursor not in positions:
        logger.debug("Cursor %s is not on the selected line; ignoring it", cursor)
        cursor = None
    runs = scan_line(grid, positions, MIN_SELECTION_RUN_LENGTH)
    chosen = choose_match(runs, order_book, cursor)
    if chosen is None:
        return None
    match, order = chosen
    order_book.remove_order(order)
    cleared = clear_runs(grid, [match])
    initial_drops = apply_gravity(grid, pool, rng)
    added = order_book.replenish(pool, rng)
    cascades = collect_cascades(grid, pool, rng, max_rounds=max_cascade_rounds)
    return MatchResult(
        match=match,
        fulfilled_order=order,
        cleared_positions=cleared,
        initial_drops=initial_drops,
        cascades=cascades,
        added_order=added,
    )


class MatchResolutionSystem:
    """Runs the resolver for line selections made in the session world and reports the outcome."""

    def __init__(self, world: World, event_bus: EventBus, *, max_cascade_rounds: int = MAX_CASCADE_ROUNDS):
        self.world = world
        self.event_bus = event_bus
        self.max_cascade_rounds = max_cascade_rounds
        self.last_result: Optional[MatchResult] = None
        self.event_bus.subscribe(EVENT_LINE_SELECTED, self.on_line_selected)

    def on_line_selected(self, sender, **kwargs):
        line = kwargs.get('line') or []
        cursor = kwargs.get('cursor')
        self.resolve_selection(line, cursor)

    def resolve_selection(
        self,
        line: Sequence[GridPosition],
        cursor: Optional[GridPosition] = None,
    ) -> Optional[MatchResult]:
        grid = get_grid(self.world)
        order_book = get_order_book(self.world)
        state = get_or_create_game_state(self.world)
        grid.deselect_all()
        for pos in line:
            grid.select(pos)
        result = resolve_line_selection(
            grid,
            order_book,
            state.available_ingredients,
            line,
            cursor,
            rng=get_world_random(self.world),
            max_cascade_rounds=self.max_cascade_rounds,
        )
        self.last_result = result
        if result is None:
            logger.debug("No order matched line %s", [str(pos) for pos in line])
            self.event_bus.emit(EVENT_MATCH_REJECTED, line=list(line), cursor=cursor)
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason="selection")
            return None
        grid.deselect_all()
        stars = result.total_stars_earned
        state.stars += stars
        state.last_order_stars_earned = stars
        self._emit_result(result, state.stars)
        return result

    def _emit_result(self, result: MatchResult, total_stars: int) -> None:
        self.event_bus.emit(EVENT_ORDER_FULFILLED, order=result.fulfilled_order, match=result.match)
        if result.added_order is not None:
            self.event_bus.emit(EVENT_ORDER_ADDED, order=result.added_order)
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=result.cleared_positions, drops=result.initial_drops)
        for depth, cascade in enumerate(result.cascades, start=1):
            self.event_bus.emit(EVENT_CASCADE_STEP, depth=depth, matches=cascade.matches, drops=cascade.drops)
        if result.cascades:
            self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=len(result.cascades))
        if result.total_stars_earned:
            self.event_bus.emit(EVENT_STARS_EARNED, amount=result.total_stars_earned, total=total_stars)
        self.event_bus.emit(EVENT_MATCH_RESOLVED, result=result)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="match_resolved")
