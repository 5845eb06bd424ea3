from dataclasses import dataclass, field
from enum import Enum, auto

from ramen_rush.components.grid_position import GridPosition


class CursorDirection(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass(slots=True)
class Cursor:
    """Player cursor: the highlighted cell and whether it spans a row or a column."""
    position: GridPosition = field(default_factory=lambda: GridPosition(0, 0))
    horizontal: bool = True
