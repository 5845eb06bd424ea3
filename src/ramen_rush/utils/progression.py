"""Level-driven ingredient unlocks. Pure functions over the ingredient catalog."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ramen_rush.components.ingredient import IngredientCategory, IngredientType
from ramen_rush.constants import LEVEL_ONE_INGREDIENTS


def unlock_ingredients(level: int) -> List[IngredientType]:
    """All ingredients whose unlock level has been reached, in catalog order."""
    return [ingredient for ingredient in IngredientType if ingredient.unlock_level <= level]


def next_unlock(level: int) -> Optional[IngredientType]:
    locked = [ingredient for ingredient in IngredientType if ingredient.unlock_level > level]
    if not locked:
        return None
    return min(locked, key=lambda ingredient: ingredient.unlock_level)


def progress_to_next_unlock(level: int) -> Optional[Tuple[int, int]]:
    """Return ``(current, needed)`` levels for the next unlock, or None when all are unlocked."""
    upcoming = next_unlock(level)
    if upcoming is None:
        return None
    return level, upcoming.unlock_level


def is_unlocked(ingredient: IngredientType, level: int) -> bool:
    return ingredient.unlock_level <= level


def unlocked_by_category(level: int) -> Dict[IngredientCategory, List[IngredientType]]:
    grouped: Dict[IngredientCategory, List[IngredientType]] = {}
    for ingredient in unlock_ingredients(level):
        grouped.setdefault(ingredient.category, []).append(ingredient)
    return grouped


def available_ingredients(level: int) -> List[IngredientType]:
    """Spawn pool for a level: the four basics on level one, every unlock afterwards."""
    if level == 1:
        return list(LEVEL_ONE_INGREDIENTS)
    return unlock_ingredients(level)
