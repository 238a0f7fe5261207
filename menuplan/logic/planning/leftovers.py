"""Leftover lunches derived from planned dinners.

Rules (by recipe servings):
  - fewer than 4: no leftovers
  - 4 or 5: one lunch the next day
  - 6 or more: two lunch units the next day, merged into one entry with 2 servings
"""
import logging
from datetime import timedelta
from typing import Dict, List, Mapping

from menuplan.domain.Plan import PlannedMeal
from menuplan.domain.Recipe import Recipe
from menuplan.utilities.constants import LEFTOVER_DOUBLE_SERVINGS, LEFTOVER_MIN_SERVINGS, LUNCH

logger = logging.getLogger(__name__)


def _leftover_units(servings: float) -> int:
    if servings < LEFTOVER_MIN_SERVINGS:
        return 0
    return 2 if servings >= LEFTOVER_DOUBLE_SERVINGS else 1


def sort_meals(meals: List[PlannedMeal]) -> List[PlannedMeal]:
    """By date; on the same date dinners (non-leftovers) come before leftovers."""
    return sorted(meals, key=lambda m: (m.planned_date, m.is_leftover))


def generate_leftover_lunches(dinners: List[PlannedMeal], recipe_lookup: Mapping[str, Recipe]) -> List[PlannedMeal]:
    leftovers: Dict[str, PlannedMeal] = {}
    for dinner in dinners:
        recipe = recipe_lookup.get(dinner.recipe_id)
        if recipe is None:
            logger.debug("No recipe for planned dinner %s, skipping leftovers", dinner.recipe_id)
            continue
        next_day = dinner.planned_date + timedelta(days=1)
        for _ in range(_leftover_units(recipe.servings)):
            key = f"{dinner.recipe_id}|{next_day.isoformat()}"
            existing = leftovers.get(key)
            if existing is not None:
                existing.servings += 1
                continue
            leftovers[key] = PlannedMeal(
                recipe_id=dinner.recipe_id,
                planned_date=next_day,
                meal_type=LUNCH,
                servings=1,
                is_leftover=True,
                leftover_source_date=dinner.planned_date,
            )
    return list(leftovers.values())


def derive_leftovers(dinners: List[PlannedMeal], recipe_lookup: Mapping[str, Recipe],
                     leftover_enabled: bool = True) -> List[PlannedMeal]:
    """Return the dinners plus their leftover lunches, in plan order."""
    meals = list(dinners)
    if leftover_enabled:
        meals.extend(generate_leftover_lunches(dinners, recipe_lookup))
    return sort_meals(meals)


__all__ = ['derive_leftovers', 'generate_leftover_lunches', 'sort_meals']
