from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
MAX_STORED_WEEKS: Final[int] = 12
MAX_DINNERS_PER_WEEK: Final[int] = 7

# Meal types
DINNER: Final[str] = "dinner"
LUNCH: Final[str] = "lunch"
BREAKFAST: Final[str] = "breakfast"
SNACK: Final[str] = "snack"
MEAL_TYPES: Final[tuple] = (DINNER, LUNCH, BREAKFAST, SNACK)

# Selection diversity caps
MAX_PER_SUBCATEGORY: Final[int] = 2
MAX_PER_CATEGORY: Final[int] = 3

# Leftover thresholds (recipe servings)
LEFTOVER_MIN_SERVINGS: Final[int] = 4
LEFTOVER_DOUBLE_SERVINGS: Final[int] = 6

# Grocery categories in shopping order
CATEGORY_ORDER: Final[dict[str, int]] = {
    "produce": 0,
    "protein": 1,
    "dairy": 2,
    "bakery": 3,
    "frozen": 4,
    "spices": 5,
    "pantry": 6,
    "other": 7,
}
CATEGORY_LABELS: Final[dict[str, str]] = {
    "produce": "Produce",
    "protein": "Protein and meat",
    "dairy": "Dairy and eggs",
    "bakery": "Bakery and bread",
    "frozen": "Frozen",
    "spices": "Spices and seasoning",
    "pantry": "Pantry",
    "other": "Other",
}

DEFAULT_STORE: Final[str] = "Any"
STORES: Final[tuple] = ("Costco", "Sam's", "Kroger", DEFAULT_STORE)

# Sections with this word in their heading are optional extras
OPTIONAL_SECTION_KEYWORD: Final[str] = "sides"
