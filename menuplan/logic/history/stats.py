"""Recipe stats derived from the cooking history log.

Nothing is stored: stats are recomputed from the full log on every call.
Dates are plain calendar dates compared against the current UTC date, so
the day count does not drift with the host timezone.
"""
from datetime import date, datetime, timezone
from typing import Dict, Iterable, Optional

from menuplan.domain.CookedMeal import CookedMeal, RecipeStats


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def get_recipe_stats(recipe_id: str, cooked_meals: Iterable[CookedMeal], today: Optional[date] = None) -> RecipeStats:
    dates = [m.cooked_date for m in cooked_meals if m.recipe_id == recipe_id and m.cooked_date is not None]
    if not dates:
        return RecipeStats(recipe_id)
    last_cooked = max(dates)
    today = today or utc_today()
    return RecipeStats(
        recipe_id,
        last_cooked=last_cooked,
        times_cooked=len(dates),
        days_since_last_made=(today - last_cooked).days,
    )


def get_all_recipe_stats(recipe_ids: Iterable[str], cooked_meals: Iterable[CookedMeal],
                         today: Optional[date] = None) -> Dict[str, RecipeStats]:
    meals = list(cooked_meals)
    today = today or utc_today()
    return {rid: get_recipe_stats(rid, meals, today) for rid in recipe_ids}


__all__ = ['utc_today', 'get_recipe_stats', 'get_all_recipe_stats']
