from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ramen_rush.constants import GRID_SIZE


@dataclass(frozen=True, slots=True, order=True)
class GridPosition:
    """Zero-indexed board coordinate. Row 0 is the top row."""
    row: int
    col: int

    def is_valid(self, grid_size: int = GRID_SIZE) -> bool:
        return 0 <= self.row < grid_size and 0 <= self.col < grid_size

    def adjacent_positions(self) -> List[GridPosition]:
        """Up, down, left, right; may include off-board positions."""
        return [
            GridPosition(self.row - 1, self.col),
            GridPosition(self.row + 1, self.col),
            GridPosition(self.row, self.col - 1),
            GridPosition(self.row, self.col + 1),
        ]

    def horizontal_line(self, length: int = GRID_SIZE, grid_size: int = GRID_SIZE) -> List[GridPosition]:
        """Positions from here rightwards; empty when the line would leave the board."""
        if self.col + length > grid_size:
            return []
        return [GridPosition(self.row, self.col + offset) for offset in range(length)]

    def vertical_line(self, length: int = GRID_SIZE, grid_size: int = GRID_SIZE) -> List[GridPosition]:
        """Positions from here downwards; empty when the line would leave the board."""
        if self.row + length > grid_size:
            return []
        return [GridPosition(self.row + offset, self.col) for offset in range(length)]

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
