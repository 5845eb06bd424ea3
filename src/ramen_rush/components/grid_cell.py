from dataclasses import dataclass
from typing import Optional

from ramen_rush.components.ingredient import IngredientType


@dataclass(slots=True)
class GridCell:
    """Single board slot: an optional ingredient plus the selection highlight flag."""
    ingredient: Optional[IngredientType] = None
    selected: bool = False

    @property
    def is_empty(self) -> bool:
        return self.ingredient is None

    def clear(self) -> None:
        self.ingredient = None
        self.selected = False

    def set_ingredient(self, ingredient: IngredientType) -> None:
        self.ingredient = ingredient
