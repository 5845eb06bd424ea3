from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nothing else references the system.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SESSION & LEVELS
# ============================================================================
EVENT_SESSION_START_REQUEST = "session_start_request"  # payload: none
EVENT_LEVEL_ADVANCE_REQUEST = "level_advance_request"  # payload: level=int|None
EVENT_LEVEL_STARTED = "level_started"                  # payload: level=int, ingredients=list[IngredientType]


# ============================================================================
# CURSOR & SELECTION
# ============================================================================
EVENT_CURSOR_MOVE_REQUEST = "cursor_move_request"      # payload: direction=CursorDirection
EVENT_CURSOR_ROTATE_REQUEST = "cursor_rotate_request"  # payload: none
EVENT_CURSOR_SELECT_REQUEST = "cursor_select_request"  # payload: none
EVENT_CURSOR_MOVED = "cursor_moved"                    # payload: position=GridPosition, horizontal=bool
EVENT_LINE_SELECTED = "line_selected"                  # payload: line=[GridPosition,...], cursor=GridPosition|None
EVENT_SELECTION_CLEAR_REQUEST = "selection_clear_request"  # payload: none
EVENT_SELECTION_CLEARED = "selection_cleared"          # payload: none


# ============================================================================
# MATCHING & ORDERS
# ============================================================================
EVENT_MATCH_REJECTED = "match_rejected"        # payload: line=[GridPosition,...], cursor=GridPosition|None
EVENT_ORDER_FULFILLED = "order_fulfilled"      # payload: order=Order, match=LineMatch
EVENT_ORDER_ADDED = "order_added"              # payload: order=Order
EVENT_MATCH_CLEARED = "match_cleared"          # payload: positions=[GridPosition,...], drops=[IngredientDrop,...]
EVENT_CASCADE_STEP = "cascade_step"            # payload: depth=int, matches=[LineMatch,...], drops=[IngredientDrop,...]
EVENT_CASCADE_COMPLETE = "cascade_complete"    # payload: depth=int
EVENT_STARS_EARNED = "stars_earned"            # payload: amount=int, total=int
EVENT_MATCH_RESOLVED = "match_resolved"        # payload: result=MatchResult


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"          # payload: reason=str
