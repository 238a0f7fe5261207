from fastapi import FastAPI, HTTPException, Query, Response
from datetime import date
from typing import Optional
import logging
import random

from menuplan.infra.History_Repository import HistoryRepository
from menuplan.infra.Plan_Repository import PlanRepository
from menuplan.infra.Recipe_Repository import RecipeRepository
from menuplan.infra.pdf_utils import generate_pdf_for_week
from menuplan.logic.planning.selector import NoEligibleRecipesError, generate_weekly_plan
from menuplan.logic.seasonal.oracle import SeasonalHelper
from menuplan.utilities import config
from menuplan.utilities.validators import PlanRequestInput

# Routers
from menuplan.api.routes import grocery, history, recipes

# Logging
logger = logging.getLogger("menuplan_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Menu Planner API", debug=config.DEBUG)

# Include routers
app.include_router(recipes.router)
app.include_router(history.router)
app.include_router(grocery.router)


# -------------------- Plans --------------------
@app.post("/api/plan/generate")
def generate_plan(payload: Optional[PlanRequestInput] = None):
    """Generate, store and return the plan for a week.

    Fields left out of the body fall back to the configured defaults.
    """
    payload = payload or PlanRequestInput()
    count = payload.count or config.DINNERS_PER_WEEK
    categories = payload.plan_categories or config.PLAN_CATEGORIES
    leftovers = config.LEFTOVER_LUNCHES if payload.leftover_lunches is None else payload.leftover_lunches
    rng = random.Random(payload.seed) if payload.seed is not None else None

    try:
        plan = generate_weekly_plan(
            RecipeRepository().list_recipes(),
            count,
            categories,
            week_start=payload.week_start,
            cooked_meals=HistoryRepository().list_cooked_meals(),
            leftover_lunches=leftovers,
            rng=rng,
        )
    except NoEligibleRecipesError as e:
        logger.warning("Plan generation failed for categories %s: %s", categories, e)
        raise HTTPException(status_code=400, detail=str(e))

    PlanRepository().save_weekly_plan(plan)
    logger.info("Stored plan for week of %s", plan.week_start.isoformat())
    return plan.to_dict()


@app.get("/api/plan/current")
def current_plan():
    plan = PlanRepository().get_current_week_plan()
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan for the current week")
    return plan.to_dict()


@app.get("/api/plan/{week_start}")
def plan_for_week(week_start: date):
    plan = PlanRepository().get_weekly_plan(week_start)
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan stored for this week")
    return plan.to_dict()


@app.post("/api/plan/{week_start}/cooked/{recipe_id:path}")
def mark_cooked(week_start: date, recipe_id: str):
    """Log every planned dinner of the recipe in that week as cooked."""
    plan = PlanRepository().get_weekly_plan(week_start)
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan stored for this week")
    dinners = [m for m in plan.dinners() if m.recipe_id == recipe_id]
    if not dinners:
        raise HTTPException(status_code=404, detail="Recipe is not planned this week")
    repo = HistoryRepository()
    logged = [repo.mark_meal_cooked(m.recipe_id, m.planned_date, m.meal_type).to_dict() for m in dinners]
    return {"logged": logged}


# -------------------- Exports --------------------
@app.get("/export_pdf")
def export_pdf(week_start: Optional[date] = None):
    repo = PlanRepository()
    plan = repo.get_weekly_plan(week_start) if week_start else repo.get_current_week_plan()
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan stored for this week")
    pdf_bytes = generate_pdf_for_week(plan, RecipeRepository().as_lookup())

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=meal_plan_{plan.week_start.isoformat()}.pdf"
        },
    )


# -------------------- Seasonality --------------------
@app.get("/api/seasonal")
def seasonal(month: Optional[int] = Query(default=None, ge=1, le=12)):
    helper = SeasonalHelper()
    m = month or helper.get_current_month()
    return {
        "month": m,
        "season": helper.get_season_label(m),
        "in_season": helper.in_season_keywords(m),
    }
