from ramen_rush.components.ingredient import IngredientType

# Board geometry
GRID_SIZE = 4
# Upcoming ingredients held above each column
PREVIEW_QUEUE_SIZE = 4

# Orders
MAX_ORDERS = 4
ORDER_MIN_QUANTITY = 1
ORDER_MAX_QUANTITY = 3

# Runs of at least this length anywhere on the board clear automatically.
MIN_CASCADE_RUN_LENGTH = 4
# Runs along a selected line are all considered, singletons included.
MIN_SELECTION_RUN_LENGTH = 1
# Upper bound on cascade passes for one player action; hitting it is a bug.
MAX_CASCADE_ROUNDS = 64

# Progression
STARTING_LEVEL = 1
# Level one plays with the four basic ingredients only (no bowls).
LEVEL_ONE_INGREDIENTS = (
    IngredientType.RAMEN,
    IngredientType.CHASHU,
    IngredientType.SOFT_BOILED_EGG,
    IngredientType.GREEN_ONIONS,
)
