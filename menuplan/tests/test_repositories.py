import json
from datetime import date, timedelta

import pytest

from menuplan.domain.CookedMeal import CookedMeal
from menuplan.domain.Plan import PlannedMeal, WeeklyPlan
from menuplan.infra.Grocery_Repository import GroceryAssignmentsRepository
from menuplan.infra.History_Repository import HistoryRepository
from menuplan.infra.Plan_Repository import PlanRepository
from menuplan.infra.Recipe_Repository import RecipeRepository
from menuplan.infra.json_store import load_json, save_json


def make_plan(monday, recipe_id="tacos"):
    return WeeklyPlan(monday, [PlannedMeal(recipe_id, monday, servings=4)])


def test_load_json_missing_and_invalid(tmp_path):
    assert load_json(tmp_path / "missing.json", []) == []
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_json(broken, {"x": 1}) == {"x": 1}


def test_save_json_creates_parent_and_leaves_no_temp_files(tmp_path):
    target = tmp_path / "nested" / "data.json"
    save_json(target, {"a": [1, 2]})
    assert json.loads(target.read_text(encoding="utf-8")) == {"a": [1, 2]}
    assert [p.name for p in target.parent.iterdir()] == ["data.json"]


def test_plan_repository_replaces_same_week(tmp_path):
    repo = PlanRepository(tmp_path / "plans.json")
    monday = date(2024, 6, 10)
    repo.save_weekly_plan(make_plan(monday, "tacos"))
    repo.save_weekly_plan(make_plan(monday, "chili"))

    plans = repo.list_weekly_plans()
    assert len(plans) == 1
    assert plans[0].meals[0].recipe_id == "chili"
    # any day of the week finds the plan
    assert repo.get_weekly_plan(date(2024, 6, 13)).week_start == monday
    assert repo.get_weekly_plan(date(2024, 6, 17)) is None
    assert repo.get_current_week_plan(today=date(2024, 6, 16)).week_start == monday


def test_plan_repository_keeps_latest_twelve_weeks(tmp_path):
    repo = PlanRepository(tmp_path / "plans.json")
    first = date(2024, 1, 1)
    for week in range(14):
        repo.save_weekly_plan(make_plan(first + timedelta(weeks=week)))

    starts = [p.week_start for p in repo.list_weekly_plans()]
    assert len(starts) == 12
    assert starts[0] == first + timedelta(weeks=13)
    assert starts == sorted(starts, reverse=True)
    assert repo.get_weekly_plan(first) is None


def test_history_repository(tmp_path):
    path = tmp_path / "cooked.json"
    path.write_text(json.dumps([
        {"recipe_id": "tacos", "cooked_date": "2024-06-01"},
        {"recipe_id": "", "cooked_date": "2024-06-02"},
        {"recipe_id": "soup", "cooked_date": "not a date"},
    ]), encoding="utf-8")
    repo = HistoryRepository(path)
    assert [m.recipe_id for m in repo.list_cooked_meals()] == ["tacos"]

    repo.add_cooked_meal(CookedMeal("soup", date(2024, 6, 3), notes="doubled it"))
    meal = repo.mark_meal_cooked("tacos", date(2024, 6, 5))
    assert meal.meal_type == "dinner"
    assert len(repo.list_cooked_meals()) == 3

    assert repo.remove_cooked_meal("tacos", date(2024, 6, 1)) == 1
    assert repo.remove_cooked_meal("tacos", date(2024, 6, 1)) == 0
    remaining = repo.list_cooked_meals()
    assert [(m.recipe_id, m.cooked_date) for m in remaining] == [
        ("soup", date(2024, 6, 3)),
        ("tacos", date(2024, 6, 5)),
    ]
    assert remaining[0].notes == "doubled it"


def test_recipe_repository(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([
        {"id": "tacos", "title": "Tacos", "category": "Mains", "ingredients": ["1 lb ground beef"]},
        "not a recipe",
    ]), encoding="utf-8")
    repo = RecipeRepository(path)
    assert [r.title for r in repo.list_recipes()] == ["Tacos"]
    assert repo.get_recipe("tacos").ingredient_names() == ["ground beef"]
    assert repo.get_recipe("missing") is None
    assert RecipeRepository(tmp_path / "nope.json").list_recipes() == []


def test_grocery_assignments_repository(tmp_path):
    repo = GroceryAssignmentsRepository(tmp_path / "assignments.json")
    repo.set_store("Olive Oil", "Costco")
    repo.set_category("olive oil", "pantry")

    directory = GroceryAssignmentsRepository(tmp_path / "assignments.json").load_directory()
    assert directory.get_store("olive oil") == "Costco"
    assert directory.get_category("OLIVE OIL") == "pantry"

    with pytest.raises(ValueError):
        repo.set_category("olive oil", "oils")
