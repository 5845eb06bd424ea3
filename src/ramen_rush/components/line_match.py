from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ramen_rush.components.grid_position import GridPosition
from ramen_rush.components.ingredient import IngredientType

if TYPE_CHECKING:
    from ramen_rush.components.order_book import Order


@dataclass(frozen=True, slots=True)
class LineMatch:
    """Maximal run of one ingredient along a scanned line, in scan order."""
    positions: tuple[GridPosition, ...]
    ingredient: IngredientType

    @property
    def length(self) -> int:
        return len(self.positions)

    def __contains__(self, position: object) -> bool:
        return position in self.positions


@dataclass(frozen=True, slots=True)
class IngredientDrop:
    """One ingredient settling into a column during gravity.

    A negative source row means the ingredient came from the preview queue above the board.
    """
    ingredient: IngredientType
    from_position: GridPosition
    to_position: GridPosition

    @property
    def drop_distance(self) -> int:
        return self.to_position.row - self.from_position.row

    @property
    def is_from_preview(self) -> bool:
        return self.from_position.row < 0


@dataclass(slots=True)
class CascadeRound:
    """Runs cleared together in one automatic pass, plus the drops that refilled them."""
    matches: List[LineMatch] = field(default_factory=list)
    drops: List[IngredientDrop] = field(default_factory=list)

    @property
    def stars_earned(self) -> int:
        return len(self.matches)


@dataclass(slots=True)
class MatchResult:
    """Everything that happened for one accepted line selection, in replay order."""
    match: LineMatch
    fulfilled_order: Optional["Order"]
    cleared_positions: List[GridPosition] = field(default_factory=list)
    initial_drops: List[IngredientDrop] = field(default_factory=list)
    cascades: List[CascadeRound] = field(default_factory=list)
    added_order: Optional["Order"] = None

    @property
    def total_stars_earned(self) -> int:
        return sum(round_.stars_earned for round_ in self.cascades)
