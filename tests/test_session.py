from ramen_rush.components.cursor import CursorDirection
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.ingredient import IngredientType
from ramen_rush.components.order_book import Order
from ramen_rush.events.bus import EventBus, EVENT_STARS_EARNED
from ramen_rush.session import GameSession
from tests.helpers import C, E, G, N, R, T, arrange_world

CASCADE_ROWS = [
    [T, N, T, N],
    [N, T, N, T],
    [T, N, T, C],
    [C, C, C, R],
]
CASCADE_QUEUES = [[E, R, R, R], [G, R, R, R], [E, R, R, R], [G, G, G, G]]


def test_start_produces_playable_snapshot():
    session = GameSession(seed=1)
    session.start()
    snap = session.snapshot()

    assert snap["level"] == 1
    assert snap["stars"] == 0
    assert snap["coins"] == 0
    assert len(snap["grid"]) == 4
    assert all(len(row) == 4 and None not in row for row in snap["grid"])
    assert len(snap["orders"]) == 4
    assert set(snap["orders"][0]) == {"ingredient", "quantity"}
    assert [len(queue) for queue in snap["preview_queues"]] == [4, 4, 4, 4]
    assert snap["selected"] == []
    assert snap["cursor"] == {"row": 0, "col": 0, "horizontal": True}
    assert snap["available_ingredients"] == ["ramen", "chashu", "soft_boiled_egg", "green_onions"]


def test_same_seed_same_session():
    first = GameSession(seed=99)
    second = GameSession(seed=99)
    first.start()
    second.start()
    assert first.snapshot() == second.snapshot()


def test_queries_mirror_world_state():
    session = GameSession(seed=5)
    session.start()
    assert session.level == 1
    assert session.coins == 0
    assert len(session.orders) == 4
    tokens = session.preview_tokens()
    assert len(tokens) == 4
    assert all(token in session.available_ingredients for token in tokens)
    assert session.cell_at(GridPosition(9, 9)) is None
    assert session.cell_at(GridPosition(0, 0)).ingredient is not None


def test_select_line_awards_cascade_stars():
    bus = EventBus()
    earned = []
    bus.subscribe(EVENT_STARS_EARNED, lambda s, **k: earned.append(k["amount"]))
    session = GameSession(event_bus=bus, seed=3)
    session.start()
    arrange_world(session.world, CASCADE_ROWS, CASCADE_QUEUES, [Order(R, 1)])

    result = session.select_line([GridPosition(3, c) for c in range(4)], GridPosition(3, 3))

    assert result.total_stars_earned == 1
    assert session.stars == 1
    assert session.state.last_order_stars_earned == 1
    assert earned == [1]
    assert session.snapshot()["grid"][0] == ["soft_boiled_egg", "green_onions", "soft_boiled_egg", "green_onions"]


def test_cursor_commands_and_rejected_selection():
    session = GameSession(seed=8)
    session.start()
    session.order_book.orders = [Order(IngredientType.SUSHI_PLATE, 2)]

    assert session.move_cursor(CursorDirection.DOWN) == GridPosition(1, 0)
    assert session.rotate_cursor() is False
    assert session.select_current_line() is None
    assert session.snapshot()["selected"] == [[r, 0] for r in range(4)]

    session.clear_selection()
    assert session.snapshot()["selected"] == []
    assert session.orders == [Order(IngredientType.SUSHI_PLATE, 2)]


def test_level_commands():
    session = GameSession(seed=4)
    session.start()
    session.advance_level()
    assert session.level == 2
    assert "ramen_bowl" in session.snapshot()["available_ingredients"]
    session.start_level(15)
    assert session.level == 15
    assert len(session.available_ingredients) == 16
    session.start()
    assert session.level == 1
