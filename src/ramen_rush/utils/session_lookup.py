import random

from esper import World

from ramen_rush.components.cursor import Cursor
from ramen_rush.components.game_state import GameState
from ramen_rush.components.grid import Grid
from ramen_rush.components.order_book import OrderBook


def get_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("Grid component not found")


def get_order_book(world: World) -> OrderBook:
    for _, book in world.get_component(OrderBook):
        return book
    raise RuntimeError("OrderBook component not found")


def get_cursor(world: World) -> Cursor:
    for _, cursor in world.get_component(Cursor):
        return cursor
    raise RuntimeError("Cursor component not found")


def get_or_create_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    existing = list(world.get_component(GameState))
    if existing:
        return existing[0][1]
    world.create_entity(GameState())
    return list(world.get_component(GameState))[0][1]


def get_world_random(world: World) -> random.Random:
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    rng = random.Random()
    setattr(world, "random", rng)
    return rng
