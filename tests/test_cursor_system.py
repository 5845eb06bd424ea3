import random

from ramen_rush.components.cursor import CursorDirection
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.order_book import Order
from ramen_rush.events.bus import (
    EventBus,
    EVENT_CURSOR_MOVE_REQUEST,
    EVENT_CURSOR_MOVED,
    EVENT_CURSOR_ROTATE_REQUEST,
    EVENT_CURSOR_SELECT_REQUEST,
    EVENT_LINE_SELECTED,
    EVENT_SELECTION_CLEAR_REQUEST,
    EVENT_SELECTION_CLEARED,
)
from ramen_rush.systems.cursor_system import CursorSystem
from ramen_rush.systems.match_resolution import MatchResolutionSystem
from ramen_rush.utils.session_lookup import get_cursor, get_grid
from ramen_rush.world import create_world
from tests.helpers import C, E, G, R, arrange_world

ROWS = [
    [R, R, C, R],
    [E, G, E, G],
    [G, E, G, E],
    [E, G, E, G],
]


def _setup(with_resolution=False):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(0))
    resolution = MatchResolutionSystem(world, bus) if with_resolution else None
    system = CursorSystem(world, bus, resolution)
    return bus, world, system


def test_move_is_clamped_to_board():
    bus, world, system = _setup()
    assert system.move(CursorDirection.UP) == GridPosition(0, 0)
    assert system.move(CursorDirection.LEFT) == GridPosition(0, 0)
    for _ in range(6):
        system.move(CursorDirection.RIGHT)
    assert get_cursor(world).position == GridPosition(0, 3)
    for _ in range(6):
        system.move(CursorDirection.DOWN)
    assert get_cursor(world).position == GridPosition(3, 3)


def test_rotate_switches_line_orientation():
    bus, world, system = _setup()
    moved = []
    bus.subscribe(EVENT_CURSOR_MOVED, lambda s, **k: moved.append(k))
    system.move(CursorDirection.RIGHT)
    assert system.current_line() == [GridPosition(0, c) for c in range(4)]

    assert system.rotate() is False
    assert system.current_line() == [GridPosition(r, 1) for r in range(4)]
    assert moved[-1] == {"position": GridPosition(0, 1), "horizontal": False}


def test_requests_drive_the_cursor():
    bus, world, system = _setup()
    bus.emit(EVENT_CURSOR_MOVE_REQUEST, direction=CursorDirection.DOWN)
    bus.emit(EVENT_CURSOR_MOVE_REQUEST, direction="sideways")
    bus.emit(EVENT_CURSOR_ROTATE_REQUEST)
    cursor = get_cursor(world)
    assert cursor.position == GridPosition(1, 0)
    assert not cursor.horizontal


def test_select_without_resolver_publishes_line():
    bus, world, system = _setup()
    selected = []
    bus.subscribe(EVENT_LINE_SELECTED, lambda s, **k: selected.append(k))
    system.move(CursorDirection.DOWN)

    assert system.select_current_line() is None
    assert selected == [{"line": [GridPosition(1, c) for c in range(4)], "cursor": GridPosition(1, 0)}]


def test_select_with_resolver_returns_result():
    bus, world, system = _setup(with_resolution=True)
    arrange_world(world, ROWS, [[E] * 4] * 4, [Order(R, 1), Order(R, 2)])
    for _ in range(3):
        system.move(CursorDirection.RIGHT)

    result = system.select_current_line()

    assert result is not None
    assert result.match.positions == (GridPosition(0, 3),)
    assert result.fulfilled_order == Order(R, 1)


def test_select_request_event_resolves_through_bus():
    bus, world, system = _setup()
    resolution = MatchResolutionSystem(world, bus)
    arrange_world(world, ROWS, [[E] * 4] * 4, [Order(C, 1)])
    bus.emit(EVENT_CURSOR_SELECT_REQUEST)
    assert resolution.last_result is not None
    assert resolution.last_result.fulfilled_order == Order(C, 1)


def test_clear_selection_after_rejection():
    bus, world, system = _setup(with_resolution=True)
    grid = arrange_world(world, ROWS, [[E] * 4] * 4, [Order(G, 3)])
    cleared = []
    bus.subscribe(EVENT_SELECTION_CLEARED, lambda s, **k: cleared.append(True))

    assert system.select_current_line() is None
    assert grid.selected_positions() == [GridPosition(0, c) for c in range(4)]

    bus.emit(EVENT_SELECTION_CLEAR_REQUEST)
    assert get_grid(world).selected_positions() == []
    assert cleared == [True]
