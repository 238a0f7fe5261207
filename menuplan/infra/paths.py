from pathlib import Path

from menuplan.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'
PLANS_FILE = DATA_DIR / 'weekly_plans.json'
COOKED_FILE = DATA_DIR / 'cooked_meals.json'
GROCERY_ASSIGNMENTS_FILE = DATA_DIR / 'grocery_assignments.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'PLANS_FILE', 'COOKED_FILE', 'GROCERY_ASSIGNMENTS_FILE']
