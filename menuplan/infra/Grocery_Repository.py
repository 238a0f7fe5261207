"""Persisted ingredient -> category / store assignments."""
from pathlib import Path
from typing import Optional

from menuplan.infra import paths
from menuplan.infra.json_store import load_json, save_json
from menuplan.logic.shopping.categories import IngredientDirectory


class GroceryAssignmentsRepository:
    def __init__(self, file_path: Optional[Path] = None):
        self.file_path = Path(file_path) if file_path else paths.GROCERY_ASSIGNMENTS_FILE

    def load_directory(self) -> IngredientDirectory:
        return IngredientDirectory.from_dict(load_json(self.file_path, {}))

    def set_store(self, ingredient_name: str, store: str) -> IngredientDirectory:
        directory = self.load_directory()
        directory.set_store(ingredient_name, store)
        save_json(self.file_path, directory.to_dict())
        return directory

    def set_category(self, ingredient_name: str, category: str) -> IngredientDirectory:
        '''Raises ValueError for categories outside the known grocery categories.'''
        directory = self.load_directory()
        directory.set_category(ingredient_name, category)
        save_json(self.file_path, directory.to_dict())
        return directory
