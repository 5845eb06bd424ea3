import random

from esper import World

from ramen_rush.components.cursor import Cursor
from ramen_rush.components.game_state import GameState
from ramen_rush.components.grid import Grid
from ramen_rush.components.order_book import OrderBook
from ramen_rush.constants import GRID_SIZE, MAX_ORDERS, PREVIEW_QUEUE_SIZE, STARTING_LEVEL
from ramen_rush.events.bus import EventBus
from ramen_rush.utils.progression import available_ingredients


def create_world(
    event_bus: EventBus,
    *,
    grid_size: int = GRID_SIZE,
    queue_size: int = PREVIEW_QUEUE_SIZE,
    max_orders: int = MAX_ORDERS,
    level: int = STARTING_LEVEL,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding one session entity with an empty board and order book.

    The board stays empty until a level is started by ``LevelSystem``.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(
        GameState(level=level, available_ingredients=available_ingredients(level)),
        Grid(size=grid_size, queue_size=queue_size),
        OrderBook(capacity=max_orders),
        Cursor(),
    )
    return world
