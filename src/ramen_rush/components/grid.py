from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from ramen_rush.components.grid_cell import GridCell
from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.ingredient import IngredientType
from ramen_rush.constants import GRID_SIZE, PREVIEW_QUEUE_SIZE


@dataclass(slots=True)
class Grid:
    """Square board of cells plus one preview queue of upcoming ingredients per column.

    Reads outside the board return None and writes outside the board are ignored.
    Matching, clearing and gravity live in ``ramen_rush.systems.board_ops``.
    """
    size: int = GRID_SIZE
    queue_size: int = PREVIEW_QUEUE_SIZE
    cells: List[List[GridCell]] = field(init=False)
    preview_queues: List[Deque[IngredientType]] = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        self.cells = [[GridCell() for _ in range(self.size)] for _ in range(self.size)]
        self.preview_queues = [deque() for _ in range(self.size)]

    def contains(self, position: GridPosition) -> bool:
        return position.is_valid(self.size)

    def cell_at(self, position: GridPosition) -> Optional[GridCell]:
        if not self.contains(position):
            return None
        return self.cells[position.row][position.col]

    def ingredient_at(self, position: GridPosition) -> Optional[IngredientType]:
        cell = self.cell_at(position)
        return cell.ingredient if cell is not None else None

    def set_ingredient(self, ingredient: IngredientType, position: GridPosition) -> None:
        cell = self.cell_at(position)
        if cell is not None:
            cell.set_ingredient(ingredient)

    def clear_cell(self, position: GridPosition) -> None:
        cell = self.cell_at(position)
        if cell is not None:
            cell.clear()

    def select(self, position: GridPosition) -> None:
        cell = self.cell_at(position)
        if cell is not None:
            cell.selected = True

    def deselect(self, position: GridPosition) -> None:
        cell = self.cell_at(position)
        if cell is not None:
            cell.selected = False

    def deselect_all(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.selected = False

    def selected_positions(self) -> List[GridPosition]:
        return [
            GridPosition(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c].selected
        ]

    def positions_with(self, ingredient: IngredientType) -> List[GridPosition]:
        return [
            GridPosition(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c].ingredient == ingredient
        ]

    def row_positions(self, row: int) -> List[GridPosition]:
        if not 0 <= row < self.size:
            return []
        return [GridPosition(row, c) for c in range(self.size)]

    def column_positions(self, col: int) -> List[GridPosition]:
        if not 0 <= col < self.size:
            return []
        return [GridPosition(r, col) for r in range(self.size)]

    def is_full(self) -> bool:
        return all(not cell.is_empty for row in self.cells for cell in row)

    def preview_token(self, col: int) -> Optional[IngredientType]:
        """Peek at the next ingredient that will enter ``col`` from above."""
        if not 0 <= col < self.size:
            return None
        queue = self.preview_queues[col]
        return queue[0] if queue else None

    def ingredient_rows(self) -> List[List[Optional[IngredientType]]]:
        """Row-major copy of the ingredient layout."""
        return [[cell.ingredient for cell in row] for row in self.cells]
