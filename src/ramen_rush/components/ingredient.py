from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class IngredientCategory(str, Enum):
    """Broad family an ingredient belongs to."""
    NOODLES = "noodles"
    PROTEINS = "proteins"
    VEGETABLES = "vegetables"
    BOWLS = "bowls"


class IngredientType(str, Enum):
    """Every token kind that can occupy a grid cell.

    Declaration order is the catalog order used by progression lookups.
    """
    # Noodles
    RAMEN = "ramen"
    UDON = "udon"
    SOBA = "soba"
    RICE_NOODLES = "rice_noodles"
    # Proteins
    CHASHU = "chashu"
    SOFT_BOILED_EGG = "soft_boiled_egg"
    TOFU = "tofu"
    TEMPURA_SHRIMP = "tempura_shrimp"
    # Vegetables
    GREEN_ONIONS = "green_onions"
    NORI = "nori"
    BAMBOO_SHOOTS = "bamboo_shoots"
    BOK_CHOY = "bok_choy"
    # Bowls
    RAMEN_BOWL = "ramen_bowl"
    DONBURI_BOWL = "donburi_bowl"
    BENTO_BOX = "bento_box"
    SUSHI_PLATE = "sushi_plate"

    @property
    def spec(self) -> "IngredientSpec":
        return INGREDIENT_CATALOG[self]

    @property
    def category(self) -> IngredientCategory:
        return self.spec.category

    @property
    def unlock_level(self) -> int:
        return self.spec.unlock_level

    @property
    def display_name(self) -> str:
        return self.spec.display_name

    @property
    def placeholder_color(self) -> Tuple[int, int, int]:
        return self.spec.placeholder_color

    def is_unlocked(self, level: int) -> bool:
        return self.unlock_level <= level


@dataclass(frozen=True, slots=True)
class IngredientSpec:
    """Static catalog entry for one ingredient kind."""
    category: IngredientCategory
    unlock_level: int
    display_name: str
    placeholder_color: Tuple[int, int, int]


INGREDIENT_CATALOG: Dict[IngredientType, IngredientSpec] = {
    IngredientType.RAMEN:           IngredientSpec(IngredientCategory.NOODLES, 0, "Ramen", (255, 217, 61)),              # #FFD93D
    IngredientType.UDON:            IngredientSpec(IngredientCategory.NOODLES, 3, "Udon", (255, 254, 247)),              # #FFFEF7
    IngredientType.SOBA:            IngredientSpec(IngredientCategory.NOODLES, 6, "Soba", (166, 124, 82)),               # #A67C52
    IngredientType.RICE_NOODLES:    IngredientSpec(IngredientCategory.NOODLES, 9, "Rice Noodles", (255, 239, 213)),      # #FFEFD5
    IngredientType.CHASHU:          IngredientSpec(IngredientCategory.PROTEINS, 0, "Chashu Pork", (232, 180, 164)),      # #E8B4A4
    IngredientType.SOFT_BOILED_EGG: IngredientSpec(IngredientCategory.PROTEINS, 0, "Soft-Boiled Egg", (255, 184, 0)),    # #FFB800
    IngredientType.TOFU:            IngredientSpec(IngredientCategory.PROTEINS, 4, "Tofu", (245, 230, 211)),             # #F5E6D3
    IngredientType.TEMPURA_SHRIMP:  IngredientSpec(IngredientCategory.PROTEINS, 7, "Tempura Shrimp", (255, 107, 53)),    # #FF6B35
    IngredientType.GREEN_ONIONS:    IngredientSpec(IngredientCategory.VEGETABLES, 0, "Green Onions", (168, 230, 161)),   # #A8E6A1
    IngredientType.NORI:            IngredientSpec(IngredientCategory.VEGETABLES, 5, "Nori", (26, 26, 26)),              # #1A1A1A
    IngredientType.BAMBOO_SHOOTS:   IngredientSpec(IngredientCategory.VEGETABLES, 8, "Bamboo Shoots", (232, 220, 160)),  # #E8DCA0
    IngredientType.BOK_CHOY:        IngredientSpec(IngredientCategory.VEGETABLES, 10, "Bok Choy", (124, 179, 66)),       # #7CB342
    IngredientType.RAMEN_BOWL:      IngredientSpec(IngredientCategory.BOWLS, 0, "Ramen Bowl", (255, 255, 255)),          # #FFFFFF
    IngredientType.DONBURI_BOWL:    IngredientSpec(IngredientCategory.BOWLS, 11, "Donburi Bowl", (25, 118, 210)),        # #1976D2
    IngredientType.BENTO_BOX:       IngredientSpec(IngredientCategory.BOWLS, 13, "Bento Box", (139, 69, 19)),            # #8B4513
    IngredientType.SUSHI_PLATE:     IngredientSpec(IngredientCategory.BOWLS, 15, "Sushi Plate", (255, 255, 255)),        # #FFFFFF
}
