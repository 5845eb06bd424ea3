from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

from esper import World

from ramen_rush.components.grid import Grid
from ramen_rush.components.ingredient import IngredientType
from ramen_rush.components.order_book import Order
from ramen_rush.utils.session_lookup import get_grid, get_order_book

R = IngredientType.RAMEN
C = IngredientType.CHASHU
E = IngredientType.SOFT_BOILED_EGG
G = IngredientType.GREEN_ONIONS
T = IngredientType.TOFU
N = IngredientType.NORI


def build_grid(rows: Sequence[Sequence[Optional[IngredientType]]], queue_size: int = 4) -> Grid:
    """Square grid laid out row by row; None leaves a cell empty."""
    grid = Grid(size=len(rows), queue_size=queue_size)
    load_rows(grid, rows)
    return grid


def load_rows(grid: Grid, rows: Sequence[Sequence[Optional[IngredientType]]]) -> None:
    for r, row in enumerate(rows):
        for c, ingredient in enumerate(row):
            cell = grid.cells[r][c]
            cell.ingredient = ingredient
            cell.selected = False


def set_queues(grid: Grid, queues: Sequence[Sequence[IngredientType]]) -> None:
    for col, queue in enumerate(queues):
        grid.preview_queues[col] = deque(queue)


def arrange_world(
    world: World,
    rows: Sequence[Sequence[Optional[IngredientType]]],
    queues: Sequence[Sequence[IngredientType]],
    orders: Sequence[Order],
) -> Grid:
    """Overwrite the session board, preview queues and orders of ``world``."""
    grid = get_grid(world)
    load_rows(grid, rows)
    set_queues(grid, queues)
    book = get_order_book(world)
    book.orders = list(orders)
    return grid
