import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

import httpx
from fastapi import APIRouter, HTTPException, Query, Response

from menuplan.domain.GroceryItem import GroceryItem
from menuplan.domain.Plan import WeeklyPlan
from menuplan.infra import paths
from menuplan.infra.Grocery_Repository import GroceryAssignmentsRepository
from menuplan.infra.Plan_Repository import PlanRepository
from menuplan.infra.Recipe_Repository import RecipeRepository
from menuplan.infra.pdf_utils import generate_pdf_for_grocery_list
from menuplan.infra.todoist import TodoistConfigError, TodoistExporter
from menuplan.logic.export.markdown import build_grocery_markdown
from menuplan.logic.shopping.list_builder import (
    generate_grocery_list,
    group_by_category,
    group_by_store,
    recipes_for_plan,
)
from menuplan.utilities import config
from menuplan.utilities.validators import CategoryAssignmentInput, StoreAssignmentInput

logger = logging.getLogger("menuplan_app")

router = APIRouter(tags=["grocery"])


def load_plan(week_start: Optional[date]) -> WeeklyPlan:
    repo = PlanRepository()
    plan = repo.get_weekly_plan(week_start) if week_start else repo.get_current_week_plan()
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan stored for this week")
    return plan


def build_week_grocery_list(week_start: Optional[date]) -> Tuple[WeeklyPlan, List[str], List[GroceryItem]]:
    """Grocery items for the dinners of a stored plan (leftover lunches add nothing)."""
    plan = load_plan(week_start)
    recipes = recipes_for_plan(plan, RecipeRepository().as_lookup())
    directory = GroceryAssignmentsRepository().load_directory()
    items = generate_grocery_list(recipes, directory.get_category, directory.get_store)
    titles = list(dict.fromkeys(r.title for r in recipes))
    return plan, titles, items


def _export_path() -> Path:
    target = Path(config.GROCERY_EXPORT_PATH)
    return target if target.is_absolute() else paths.DATA_DIR / target


@router.get("/api/grocery-list")
def grocery_list(week_start: Optional[date] = None, group_by: str = Query("category", pattern="^(category|store)$")):
    plan, titles, items = build_week_grocery_list(week_start)
    grouper = group_by_store if group_by == "store" else group_by_category
    return {
        "week_start": plan.week_start.isoformat(),
        "recipes": titles,
        "count": len(items),
        "items": [i.to_dict() for i in items],
        "groups": {key: [i.name for i in group] for key, group in grouper(items).items()},
    }


@router.get("/api/grocery-list/markdown")
def grocery_list_markdown(week_start: Optional[date] = None, save: bool = False):
    _, titles, items = build_week_grocery_list(week_start)
    text = build_grocery_markdown(items, titles)
    if save:
        target = _export_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        logger.info("Grocery list written to %s", target)
    return Response(content=text, media_type="text/markdown")


@router.get("/api/grocery-list/pdf")
def grocery_list_pdf(week_start: Optional[date] = None):
    plan, _, items = build_week_grocery_list(week_start)
    return Response(
        content=generate_pdf_for_grocery_list(items),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=grocery_list_{plan.week_start.isoformat()}.pdf"},
    )


@router.post("/api/grocery-list/todoist")
def grocery_list_todoist(week_start: Optional[date] = None):
    _, _, items = build_week_grocery_list(week_start)
    try:
        exporter = TodoistExporter(config.TODOIST_API_TOKEN, config.TODOIST_PROJECT_NAME)
    except TodoistConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    try:
        added = exporter.export(items)
    except httpx.HTTPError as e:
        logger.error("Todoist export failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Todoist export failed: {e}")
    finally:
        exporter.close()
    return {"project": config.TODOIST_PROJECT_NAME, "added": added}


@router.put("/api/grocery/store/{name}")
def assign_store(name: str, payload: StoreAssignmentInput):
    GroceryAssignmentsRepository().set_store(name, payload.store)
    return {"name": name, "store": payload.store}


@router.put("/api/grocery/category/{name}")
def assign_category(name: str, payload: CategoryAssignmentInput):
    try:
        GroceryAssignmentsRepository().set_category(name, payload.category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"name": name, "category": payload.category}
