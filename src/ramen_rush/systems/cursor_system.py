from typing import List, Optional

from esper import World

from ramen_rush.components.cursor import Cursor, CursorDirection
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.line_match import MatchResult
from ramen_rush.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CURSOR_MOVE_REQUEST,
    EVENT_CURSOR_MOVED,
    EVENT_CURSOR_ROTATE_REQUEST,
    EVENT_CURSOR_SELECT_REQUEST,
    EVENT_LINE_SELECTED,
    EVENT_SELECTION_CLEAR_REQUEST,
    EVENT_SELECTION_CLEARED,
)
from ramen_rush.systems.match_resolution import MatchResolutionSystem
from ramen_rush.utils.session_lookup import get_cursor, get_grid

_DELTAS = {
    CursorDirection.UP: (-1, 0),
    CursorDirection.DOWN: (1, 0),
    CursorDirection.LEFT: (0, -1),
    CursorDirection.RIGHT: (0, 1),
}


class CursorSystem:
    """Moves and rotates the cursor and turns it into full-line selections.

    When a MatchResolutionSystem is supplied it resolves selections directly so the caller
    gets the result back; otherwise selections are published as EVENT_LINE_SELECTED.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        match_resolution: Optional[MatchResolutionSystem] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.match_resolution = match_resolution
        self.event_bus.subscribe(EVENT_CURSOR_MOVE_REQUEST, self.on_move_request)
        self.event_bus.subscribe(EVENT_CURSOR_ROTATE_REQUEST, self.on_rotate_request)
        self.event_bus.subscribe(EVENT_CURSOR_SELECT_REQUEST, self.on_select_request)
        self.event_bus.subscribe(EVENT_SELECTION_CLEAR_REQUEST, self.on_clear_request)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if isinstance(direction, CursorDirection):
            self.move(direction)

    def on_rotate_request(self, sender, **kwargs):
        self.rotate()

    def on_select_request(self, sender, **kwargs):
        self.select_current_line()

    def on_clear_request(self, sender, **kwargs):
        self.clear_selection()

    def move(self, direction: CursorDirection) -> GridPosition:
        cursor = get_cursor(self.world)
        size = get_grid(self.world).size
        d_row, d_col = _DELTAS[direction]
        row = max(0, min(size - 1, cursor.position.row + d_row))
        col = max(0, min(size - 1, cursor.position.col + d_col))
        cursor.position = GridPosition(row, col)
        self._emit_moved(cursor)
        return cursor.position

    def rotate(self) -> bool:
        cursor = get_cursor(self.world)
        cursor.horizontal = not cursor.horizontal
        self._emit_moved(cursor)
        return cursor.horizontal

    def current_line(self) -> List[GridPosition]:
        """Full row or column through the cursor, depending on its orientation."""
        cursor = get_cursor(self.world)
        grid = get_grid(self.world)
        if cursor.horizontal:
            return grid.row_positions(cursor.position.row)
        return grid.column_positions(cursor.position.col)

    def select_current_line(self) -> Optional[MatchResult]:
        cursor = get_cursor(self.world)
        line = self.current_line()
        if self.match_resolution is not None:
            return self.match_resolution.resolve_selection(line, cursor.position)
        self.event_bus.emit(EVENT_LINE_SELECTED, line=line, cursor=cursor.position)
        return None

    def clear_selection(self) -> None:
        get_grid(self.world).deselect_all()
        self.event_bus.emit(EVENT_SELECTION_CLEARED)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="selection_cleared")

    def _emit_moved(self, cursor: Cursor) -> None:
        self.event_bus.emit(EVENT_CURSOR_MOVED, position=cursor.position, horizontal=cursor.horizontal)
