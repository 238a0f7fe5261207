from fastapi import APIRouter, HTTPException

from menuplan.infra.History_Repository import HistoryRepository
from menuplan.infra.Recipe_Repository import RecipeRepository
from menuplan.logic.history.stats import get_recipe_stats

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _summary(recipe):
    return {
        "id": recipe.id,
        "title": recipe.title,
        "category": recipe.category,
        "subcategory": recipe.subcategory,
        "servings": recipe.servings,
        "protein": recipe.protein,
        "net_carbs": recipe.net_carbs,
    }


@router.get("")
def list_recipes(category: str = None):
    """Catalog summary, optionally filtered by category (case-insensitive)."""
    recipes = RecipeRepository().list_recipes()
    if category:
        recipes = [r for r in recipes if r.category.lower() == category.lower()]
    return {"count": len(recipes), "recipes": [_summary(r) for r in recipes]}


# Recipe ids may be file paths, so they are matched with the path converter.
# The stats route is declared first so "<id>/stats" is not read as an id.
@router.get("/{recipe_id:path}/stats")
def recipe_stats(recipe_id: str):
    if RecipeRepository().get_recipe(recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return get_recipe_stats(recipe_id, HistoryRepository().list_cooked_meals()).to_dict()


@router.get("/{recipe_id:path}")
def get_recipe(recipe_id: str):
    recipe = RecipeRepository().get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()
