"""Cooking history repository (append-only log of cooked meals)."""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from menuplan.domain.CookedMeal import CookedMeal
from menuplan.infra import paths
from menuplan.infra.json_store import load_json, save_json
from menuplan.utilities.constants import DINNER

logger = logging.getLogger(__name__)


class HistoryRepository:
    def __init__(self, file_path: Optional[Path] = None):
        self.file_path = Path(file_path) if file_path else paths.COOKED_FILE

    def list_cooked_meals(self) -> List[CookedMeal]:
        data = load_json(self.file_path, [])
        meals = [CookedMeal.from_dict(entry) for entry in data if isinstance(entry, dict)]
        valid = [m for m in meals if m.recipe_id and m.cooked_date]
        if len(valid) != len(meals):
            logger.warning(f"Skipped {len(meals) - len(valid)} cooked meal entries without recipe id or date")
        return valid

    def _save(self, meals: List[CookedMeal]) -> None:
        save_json(self.file_path, [m.to_dict() for m in meals])

    def add_cooked_meal(self, meal: CookedMeal) -> None:
        meals = self.list_cooked_meals()
        meals.append(meal)
        self._save(meals)

    def remove_cooked_meal(self, recipe_id: str, cooked_date: date) -> int:
        '''Removes every entry for the recipe on that date; returns how many were removed.'''
        meals = self.list_cooked_meals()
        remaining = [m for m in meals if not (m.recipe_id == recipe_id and m.cooked_date == cooked_date)]
        removed = len(meals) - len(remaining)
        if removed:
            self._save(remaining)
        return removed

    def mark_meal_cooked(self, recipe_id: str, planned_date: date, meal_type: str = DINNER) -> CookedMeal:
        meal = CookedMeal(recipe_id, planned_date, meal_type)
        self.add_cooked_meal(meal)
        return meal
