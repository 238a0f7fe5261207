import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from menuplan.domain.Recipe import Recipe
from menuplan.infra import paths

logger = logging.getLogger(__name__)


def reading_from_recipes(file_path: Optional[Path] = None) -> List[Recipe]:
    """Read the recipe catalog from JSON file with proper error handling."""
    recipes_file = Path(file_path) if file_path else paths.RECIPES_FILE
    try:
        with open(recipes_file, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
        return [Recipe.from_dict(entry) for entry in recipes_data if isinstance(entry, dict)]
    except FileNotFoundError:
        logger.warning(f"Recipes file not found: {recipes_file}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in recipes file: {e}")
        return []


class RecipeRepository:
    def __init__(self, file_path: Optional[Path] = None):
        self.file_path = Path(file_path) if file_path else paths.RECIPES_FILE

    def list_recipes(self) -> List[Recipe]:
        return reading_from_recipes(self.file_path)

    def as_lookup(self) -> Dict[str, Recipe]:
        return {r.id: r for r in self.list_recipes()}

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        return self.as_lookup().get(recipe_id)
