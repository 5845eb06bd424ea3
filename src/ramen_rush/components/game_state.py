"""Session counters shared by the level and match systems."""
from dataclasses import dataclass, field
from typing import List

from ramen_rush.components.ingredient import IngredientType
from ramen_rush.constants import STARTING_LEVEL


@dataclass(slots=True)
class GameState:
    """Singleton component storing progression counters and the active ingredient pool.

    ``coins`` is carried for persistence but no current rule awards any.
    """
    level: int = STARTING_LEVEL
    stars: int = 0
    coins: int = 0
    last_order_stars_earned: int = 0
    available_ingredients: List[IngredientType] = field(default_factory=list)
