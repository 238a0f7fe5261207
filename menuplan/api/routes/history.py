import logging
from datetime import date

from fastapi import APIRouter, HTTPException

from menuplan.domain.CookedMeal import CookedMeal
from menuplan.infra.History_Repository import HistoryRepository
from menuplan.utilities.validators import CookedMealInput

logger = logging.getLogger("menuplan_app")

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
def list_history(recipe_id: str = None):
    meals = HistoryRepository().list_cooked_meals()
    if recipe_id:
        meals = [m for m in meals if m.recipe_id == recipe_id]
    meals.sort(key=lambda m: m.cooked_date, reverse=True)
    return {"count": len(meals), "meals": [m.to_dict() for m in meals]}


@router.post("", status_code=201)
def add_history(payload: CookedMealInput):
    meal = CookedMeal(payload.recipe_id, payload.cooked_date, payload.meal_type, payload.notes)
    HistoryRepository().add_cooked_meal(meal)
    logger.info("Recorded %s as cooked on %s", meal.recipe_id, payload.cooked_date.isoformat())
    return meal.to_dict()


@router.delete("/{recipe_id:path}/{cooked_date}")
def delete_history(recipe_id: str, cooked_date: date):
    removed = HistoryRepository().remove_cooked_meal(recipe_id, cooked_date)
    if not removed:
        raise HTTPException(status_code=404, detail="Cooked meal not found")
    return {"removed": removed}
