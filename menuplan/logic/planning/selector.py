"""Weekly plan selection.

Scores every eligible recipe, picks the top `count` under simple diversity
caps, reorders the picks so recipes sharing ingredients sit next to each
other, and lays them out as dinners from Monday onwards.
"""
import logging
import random
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence, Set

from menuplan.domain.CookedMeal import CookedMeal
from menuplan.domain.Plan import PlannedMeal, WeeklyPlan
from menuplan.domain.Recipe import Recipe
from menuplan.domain.ScoredRecipe import ScoredRecipe
from menuplan.logic.history.stats import get_all_recipe_stats, utc_today
from menuplan.logic.planning.leftovers import derive_leftovers, sort_meals
from menuplan.logic.planning.scorer import score_recipe
from menuplan.logic.seasonal.oracle import SeasonalHelper
from menuplan.utilities.constants import DINNER, MAX_DINNERS_PER_WEEK, MAX_PER_CATEGORY, MAX_PER_SUBCATEGORY

logger = logging.getLogger(__name__)


class NoEligibleRecipesError(ValueError):
    """Raised when the category filter leaves nothing to plan with."""


def get_monday(day: date) -> date:
    return day - timedelta(days=day.weekday())


def filter_eligible(recipes: Iterable[Recipe], plan_categories: Iterable[str]) -> List[Recipe]:
    wanted = {c.lower() for c in plan_categories}
    return [r for r in recipes if r.category.lower() in wanted]


def _ingredient_set(recipe: Recipe) -> Set[str]:
    return {name.lower() for name in recipe.ingredient_names()}


def get_ingredient_overlap(a: Recipe, b: Recipe) -> List[str]:
    """Names of b's ingredients that also appear in a (case-insensitive)."""
    a_names = _ingredient_set(a)
    return [name for name in b.ingredient_names() if name.lower() in a_names]


def select_recipes(scored: Sequence[ScoredRecipe], count: int) -> List[Recipe]:
    """Greedy top-`count` with at most 2 per subcategory and 3 per category.

    If the caps leave the week short, a second pass fills it from the same
    ranking with the caps ignored.
    """
    # sorted() is stable, equal scores keep input order
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    selected: List[Recipe] = []
    used_subcategories: Counter = Counter()
    used_categories: Counter = Counter()

    for item in ranked:
        if len(selected) >= count:
            break
        recipe = item.recipe
        sub_key = recipe.subcategory or recipe.category
        if used_subcategories[sub_key] >= MAX_PER_SUBCATEGORY:
            continue
        if used_categories[recipe.category] >= MAX_PER_CATEGORY:
            continue
        selected.append(recipe)
        used_subcategories[sub_key] += 1
        used_categories[recipe.category] += 1

    if len(selected) < count:
        logger.debug("Diversity caps left %d of %d slots filled, backfilling", len(selected), count)
        for item in ranked:
            if len(selected) >= count:
                break
            if any(item.recipe is r for r in selected):
                continue
            selected.append(item.recipe)

    return selected


def optimize_order(recipes: List[Recipe]) -> List[Recipe]:
    """Nearest-neighbour walk by shared ingredient names, starting from the first recipe."""
    if len(recipes) <= 2:
        return list(recipes)

    ingredient_sets = [_ingredient_set(r) for r in recipes]
    order = [0]
    remaining = list(range(1, len(recipes)))
    while remaining:
        last_set = ingredient_sets[order[-1]]
        best_idx = remaining[0]
        best_overlap = -1
        for idx in remaining:
            overlap = len(ingredient_sets[idx] & last_set)
            if overlap > best_overlap:
                best_overlap = overlap
                best_idx = idx
        order.append(best_idx)
        remaining.remove(best_idx)
    return [recipes[i] for i in order]


def generate_weekly_plan(all_recipes: Sequence[Recipe], count: int, plan_categories: Iterable[str],
                         week_start: Optional[date] = None, cooked_meals: Iterable[CookedMeal] = (),
                         leftover_lunches: bool = False, seasonal: Optional[SeasonalHelper] = None,
                         rng: Optional[random.Random] = None, today: Optional[date] = None,
                         month: Optional[int] = None) -> WeeklyPlan:
    """Build a fresh WeeklyPlan of `count` dinners.

    Args:
        all_recipes: the full catalog; filtered here by plan_categories.
        count: number of dinners wanted, at most one per day of the week.
        plan_categories: recipe categories allowed (case-insensitive).
        week_start: any day of the target week; defaults to the current UTC week.
        cooked_meals: cooking history used for recency/frequency stats.
        leftover_lunches: when True, add leftover lunch entries.
        rng: random source for the variety term (seed it for reproducible plans).

    Raises:
        NoEligibleRecipesError: no recipe matches plan_categories.
    """
    eligible = filter_eligible(all_recipes, plan_categories)
    if not eligible:
        raise NoEligibleRecipesError('No eligible recipes found for meal planning.')
    if count > MAX_DINNERS_PER_WEEK:
        logger.warning("Requested %d dinners, capping at %d", count, MAX_DINNERS_PER_WEEK)
        count = MAX_DINNERS_PER_WEEK

    today = today or utc_today()
    seasonal = seasonal or SeasonalHelper()
    rng = rng or random.Random()

    stats = get_all_recipe_stats([r.id for r in eligible], cooked_meals, today)
    scored = [score_recipe(r, stats[r.id], seasonal=seasonal, rng=rng, month=month) for r in eligible]
    selected = optimize_order(select_recipes(scored, count))

    monday = get_monday(week_start or today)
    dinners = [
        PlannedMeal(recipe_id=recipe.id, planned_date=monday + timedelta(days=i),
                    meal_type=DINNER, servings=recipe.servings)
        for i, recipe in enumerate(selected)
    ]
    if leftover_lunches:
        meals = derive_leftovers(dinners, {r.id: r for r in selected})
    else:
        meals = sort_meals(dinners)

    logger.info("Generated plan for week of %s: %d dinners from %d eligible recipes",
                monday.isoformat(), len(dinners), len(eligible))
    return WeeklyPlan(week_start=monday, meals=meals, generated_at=datetime.now(timezone.utc))


__all__ = [
    'NoEligibleRecipesError', 'filter_eligible', 'select_recipes', 'optimize_order',
    'get_ingredient_overlap', 'get_monday', 'generate_weekly_plan',
]
