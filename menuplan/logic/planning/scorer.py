"""Recipe desirability scoring.

Purely additive. Recency and frequency are tiered (one recency rule, at
most one frequency rule). A bounded random term in [0, 15) adds variety
between repeated plan generations; pass a seeded random.Random to pin it.
"""
import math
import random
from typing import List, Optional

from menuplan.domain.CookedMeal import RecipeStats
from menuplan.domain.Recipe import Recipe
from menuplan.domain.ScoredRecipe import ScoredRecipe, ScoreReason
from menuplan.logic.seasonal.oracle import SeasonalHelper

VARIETY_RANGE = 15.0
SEASONAL_BONUS_SCALE = 15


def _recency_reason(days: Optional[int]) -> ScoreReason:
    if days is None:
        return ScoreReason('never_cooked', 35)
    if days > 30:
        return ScoreReason('not_made_recently', 40, [f"{days} days"])
    if days > 14:
        return ScoreReason('made_weeks_ago', 25, [f"{days} days"])
    if days > 7:
        return ScoreReason('made_last_week', 10, [f"{days} days"])
    return ScoreReason('made_recently', 0, [f"{days} days"])


def _frequency_reason(times_cooked: int) -> Optional[ScoreReason]:
    if times_cooked > 10:
        return ScoreReason('cooked_very_often', -10, [f"{times_cooked} times"])
    if times_cooked > 5:
        return ScoreReason('cooked_often', -5, [f"{times_cooked} times"])
    return None


def score_recipe(recipe: Recipe, stats: RecipeStats, seasonal: Optional[SeasonalHelper] = None,
                 rng: Optional[random.Random] = None, month: Optional[int] = None) -> ScoredRecipe:
    seasonal = seasonal or SeasonalHelper()
    rng = rng or random.Random()
    reasons: List[ScoreReason] = [_recency_reason(stats.days_since_last_made)]

    frequency = _frequency_reason(stats.times_cooked)
    if frequency:
        reasons.append(frequency)

    # Nutrition
    if recipe.protein >= 20:
        reasons.append(ScoreReason('good_protein', 5))
    if 0 < recipe.net_carbs < 30:
        reasons.append(ScoreReason('moderate_carbs', 5))

    # Seasonality
    names = recipe.ingredient_names()
    seasonal_score = seasonal.get_recipe_seasonal_score(names, month)
    if seasonal_score > 0.5:
        in_season = seasonal.get_in_season_ingredients(names, month)
        # half-up rounding, round() would round 10.5 down to 10
        bonus = int(math.floor(seasonal_score * SEASONAL_BONUS_SCALE + 0.5))
        reasons.append(ScoreReason('in_season', bonus, in_season[:3]))
    elif 0 < seasonal_score < 0.3:
        reasons.append(ScoreReason('out_of_season', -5))

    variety = rng.random() * VARIETY_RANGE
    reasons.append(ScoreReason('variety', variety))

    return ScoredRecipe(recipe, sum(r.delta for r in reasons), reasons)


__all__ = ['score_recipe', 'VARIETY_RANGE']
