from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from ramen_rush.components.grid import Grid
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.ingredient import IngredientType
from ramen_rush.components.line_match import IngredientDrop, LineMatch
from ramen_rush.constants import MIN_CASCADE_RUN_LENGTH

# (ingredient, source row) for one slot of a settled column
ColumnEntry = Tuple[IngredientType, int]


def scan_line(
    grid: Grid,
    positions: Iterable[GridPosition],
    min_run_length: int = MIN_CASCADE_RUN_LENGTH,
) -> List[LineMatch]:
    """Group consecutive equal ingredients along ``positions`` into runs.

    Empty or off-board cells break a run. Runs shorter than ``min_run_length`` are dropped.
    """
    matches: List[LineMatch] = []
    run: List[GridPosition] = []
    last_type: Optional[IngredientType] = None
    for pos in positions:
        tval = grid.ingredient_at(pos)
        if tval is not None and tval == last_type:
            run.append(pos)
            continue
        if run and last_type is not None and len(run) >= min_run_length:
            matches.append(LineMatch(positions=tuple(run), ingredient=last_type))
        run = [pos] if tval is not None else []
        last_type = tval
    if run and last_type is not None and len(run) >= min_run_length:
        matches.append(LineMatch(positions=tuple(run), ingredient=last_type))
    return matches


def find_horizontal_matches(grid: Grid, min_run_length: int = MIN_CASCADE_RUN_LENGTH) -> List[LineMatch]:
    matches: List[LineMatch] = []
    for row in range(grid.size):
        matches.extend(scan_line(grid, grid.row_positions(row), min_run_length))
    return matches


def find_vertical_matches(grid: Grid, min_run_length: int = MIN_CASCADE_RUN_LENGTH) -> List[LineMatch]:
    matches: List[LineMatch] = []
    for col in range(grid.size):
        matches.extend(scan_line(grid, grid.column_positions(col), min_run_length))
    return matches


def find_all_board_matches(grid: Grid, min_run_length: int = MIN_CASCADE_RUN_LENGTH) -> List[LineMatch]:
    """Every qualifying run on the board: rows top-to-bottom, then columns left-to-right."""
    return find_horizontal_matches(grid, min_run_length) + find_vertical_matches(grid, min_run_length)


def clear_runs(grid: Grid, runs: Iterable[LineMatch]) -> List[GridPosition]:
    """Empty every cell referenced by ``runs`` and return the distinct positions cleared."""
    cleared: List[GridPosition] = []
    seen: set[GridPosition] = set()
    for run in runs:
        for pos in run.positions:
            if pos in seen or not grid.contains(pos):
                continue
            seen.add(pos)
            grid.clear_cell(pos)
            cleared.append(pos)
    return cleared


def _draw_for_column(grid: Grid, col: int, choices: List[IngredientType], rng: random.Random) -> IngredientType:
    queue = grid.preview_queues[col]
    if not queue:
        return rng.choice(choices)
    ingredient = queue.popleft()
    queue.append(rng.choice(choices))
    return ingredient


def apply_gravity(grid: Grid, pool: Sequence[IngredientType], rng: random.Random) -> List[IngredientDrop]:
    """Settle every column and refill the freed top rows from its preview queue.

    Existing ingredients keep their relative order and sink to the bottom. The queue head
    lands in the lowest freed row, later draws stack above it, and each comes from a
    negative source row (``row - empty_count``). Drops are reported per column left to
    right, in destination row order, for new ingredients and for ingredients that moved.
    Does nothing when ``pool`` is empty.
    """
    choices = list(pool)
    if not choices:
        return []
    size = grid.size
    drops: List[IngredientDrop] = []
    for col in range(size):
        existing: List[ColumnEntry] = []
        for row in range(size):
            ingredient = grid.cells[row][col].ingredient
            if ingredient is not None:
                existing.append((ingredient, row))
        empty_count = size - len(existing)
        if empty_count == 0:
            continue
        settled: List[Optional[ColumnEntry]] = [None] * size
        for k in range(empty_count):
            ingredient = _draw_for_column(grid, col, choices, rng)
            row = empty_count - 1 - k
            settled[row] = (ingredient, row - empty_count)
        for offset, entry in enumerate(existing):
            settled[empty_count + offset] = entry
        for row, entry in enumerate(settled):
            if entry is None:
                continue
            ingredient, from_row = entry
            if from_row == row:
                continue
            cell = grid.cells[row][col]
            cell.ingredient = ingredient
            cell.selected = False
            drops.append(
                IngredientDrop(
                    ingredient=ingredient,
                    from_position=GridPosition(from_row, col),
                    to_position=GridPosition(row, col),
                )
            )
    return drops


def clear_and_apply_gravity(
    grid: Grid,
    runs: Iterable[LineMatch],
    pool: Sequence[IngredientType],
    rng: random.Random,
) -> List[IngredientDrop]:
    clear_runs(grid, runs)
    return apply_gravity(grid, pool, rng)


def initialize_preview_queues(
    grid: Grid,
    pool: Sequence[IngredientType],
    rng: random.Random,
    queue_size: Optional[int] = None,
) -> None:
    """Fill every column's preview queue with fresh random draws; no-op on an empty pool."""
    choices = list(pool)
    if not choices:
        return
    if queue_size is not None:
        grid.queue_size = queue_size
    for queue in grid.preview_queues:
        queue.clear()
        queue.extend(rng.choice(choices) for _ in range(grid.queue_size))


def preview_tokens(grid: Grid) -> List[Optional[IngredientType]]:
    return [grid.preview_token(col) for col in range(grid.size)]


def fill_empty_cells(grid: Grid, pool: Sequence[IngredientType], rng: random.Random) -> List[GridPosition]:
    """Drop a random ingredient into every empty cell in place, without gravity."""
    choices = list(pool)
    if not choices:
        return []
    filled: List[GridPosition] = []
    for row in range(grid.size):
        for col in range(grid.size):
            pos = GridPosition(row, col)
            cell = grid.cells[row][col]
            if cell.is_empty:
                cell.set_ingredient(rng.choice(choices))
                filled.append(pos)
    return filled


def fill_grid(
    grid: Grid,
    pool: Sequence[IngredientType],
    rng: random.Random,
    *,
    avoid_run_length: int = MIN_CASCADE_RUN_LENGTH,
) -> List[GridPosition]:
    """Replace every cell with a random ingredient, avoiding ready-made runs where possible.

    A choice that would complete a horizontal or vertical run of ``avoid_run_length`` is
    excluded; when the pool leaves nothing else the full pool is used.
    """
    choices = list(pool)
    if not choices:
        return []
    tail = avoid_run_length - 1
    filled: List[GridPosition] = []
    for row in range(grid.size):
        for col in range(grid.size):
            available = list(choices)
            if tail > 0 and col >= tail:
                left = {grid.cells[row][col - k].ingredient for k in range(1, tail + 1)}
                if len(left) == 1:
                    available = [t for t in available if t not in left]
            if tail > 0 and row >= tail:
                up = {grid.cells[row - k][col].ingredient for k in range(1, tail + 1)}
                if len(up) == 1:
                    available = [t for t in available if t not in up]
            cell = grid.cells[row][col]
            cell.ingredient = rng.choice(available) if available else rng.choice(choices)
            cell.selected = False
            filled.append(GridPosition(row, col))
    return filled
