import random
import unittest
from datetime import date

from menuplan.domain.CookedMeal import CookedMeal
from menuplan.domain.Ingredient import IngredientItem, IngredientSection
from menuplan.domain.Recipe import Recipe
from menuplan.domain.ScoredRecipe import ScoredRecipe
from menuplan.logic.planning.selector import (
    NoEligibleRecipesError,
    filter_eligible,
    generate_weekly_plan,
    get_ingredient_overlap,
    get_monday,
    optimize_order,
    select_recipes,
)
from menuplan.utilities.constants import DINNER, LUNCH


def make_recipe(rid, category="Mains", subcategory="", ingredients=(), servings=4):
    section = IngredientSection("Main", [IngredientItem(name=n) for n in ingredients])
    return Recipe(id=rid, title=rid.title(), category=category, subcategory=subcategory,
                  ingredients=[section], servings=servings)


class TestFilterAndHelpers(unittest.TestCase):
    def test_filter_is_case_insensitive(self):
        recipes = [make_recipe("a", "Mains"), make_recipe("b", "soups"), make_recipe("c", "Desserts")]
        eligible = filter_eligible(recipes, ["mains", "Soups"])
        self.assertEqual([r.id for r in eligible], ["a", "b"])

    def test_get_monday(self):
        self.assertEqual(get_monday(date(2024, 6, 12)), date(2024, 6, 10))
        self.assertEqual(get_monday(date(2024, 6, 10)), date(2024, 6, 10))
        self.assertEqual(get_monday(date(2024, 6, 16)), date(2024, 6, 10))

    def test_ingredient_overlap(self):
        a = make_recipe("a", ingredients=["Onion", "garlic", "rice"])
        b = make_recipe("b", ingredients=["onion", "beans", "Garlic"])
        self.assertEqual(get_ingredient_overlap(a, b), ["onion", "Garlic"])


class TestSelectRecipes(unittest.TestCase):
    def scored(self, recipe, score):
        return ScoredRecipe(recipe, score)

    def test_subcategory_cap(self):
        chicken = [make_recipe(f"chicken{i}", subcategory="Chicken") for i in range(3)]
        beef = make_recipe("beef", subcategory="Beef")
        scored = [self.scored(chicken[0], 90), self.scored(chicken[1], 80),
                  self.scored(chicken[2], 70), self.scored(beef, 10)]
        picked = select_recipes(scored, 3)
        self.assertEqual([r.id for r in picked], ["chicken0", "chicken1", "beef"])

    def test_category_cap(self):
        mains = [make_recipe(f"main{i}", subcategory=f"Sub{i}") for i in range(5)]
        soup = make_recipe("soup", category="Soups", subcategory="Veg")
        scored = [self.scored(m, 50 - 10 * i) for i, m in enumerate(mains)] + [self.scored(soup, 5)]
        picked = select_recipes(scored, 4)
        self.assertEqual([r.id for r in picked], ["main0", "main1", "main2", "soup"])

    def test_backfill_ignores_caps(self):
        recipes = [make_recipe(f"s{i}", category="Soups") for i in range(3)]
        scored = [self.scored(r, 30 - i) for i, r in enumerate(recipes)]
        picked = select_recipes(scored, 3)
        self.assertEqual([r.id for r in picked], ["s0", "s1", "s2"])

    def test_equal_scores_keep_input_order(self):
        recipes = [make_recipe(f"r{i}", subcategory=f"Sub{i}") for i in range(3)]
        picked = select_recipes([self.scored(r, 10) for r in recipes], 2)
        self.assertEqual([r.id for r in picked], ["r0", "r1"])

    def test_fewer_recipes_than_count(self):
        recipes = [make_recipe("only")]
        self.assertEqual(len(select_recipes([self.scored(recipes[0], 1)], 5)), 1)


class TestOptimizeOrder(unittest.TestCase):
    def test_nearest_neighbour(self):
        r0 = make_recipe("r0", ingredients=["a", "b"])
        r1 = make_recipe("r1", ingredients=["x"])
        r2 = make_recipe("r2", ingredients=["b", "c"])
        r3 = make_recipe("r3", ingredients=["c", "d"])
        ordered = optimize_order([r0, r1, r2, r3])
        self.assertEqual([r.id for r in ordered], ["r0", "r2", "r3", "r1"])

    def test_ties_keep_original_order(self):
        recipes = [make_recipe(f"r{i}", ingredients=[f"i{i}"]) for i in range(4)]
        self.assertEqual(optimize_order(recipes), recipes)

    def test_short_lists_unchanged(self):
        r0 = make_recipe("r0", ingredients=["a"])
        r1 = make_recipe("r1", ingredients=["b"])
        self.assertEqual(optimize_order([r1, r0]), [r1, r0])
        self.assertEqual(optimize_order([]), [])


class TestGenerateWeeklyPlan(unittest.TestCase):
    def setUp(self):
        self.recipes = [
            make_recipe(f"main{i}", subcategory=f"Sub{i}", ingredients=[f"ingredient{i}"])
            for i in range(6)
        ] + [make_recipe("cake", category="Desserts", subcategory="Cakes")]
        self.today = date(2024, 6, 20)

    def generate(self, **kwargs):
        options = dict(week_start=date(2024, 6, 12), rng=random.Random(7), today=self.today, month=7)
        options.update(kwargs)
        return generate_weekly_plan(self.recipes, 5, ["Mains"], **options)

    def test_five_distinct_dinners_from_monday(self):
        plan = self.generate()
        self.assertEqual(plan.week_start, date(2024, 6, 10))
        dinners = plan.dinners()
        self.assertEqual(len(dinners), 5)
        self.assertEqual(len({m.recipe_id for m in dinners}), 5)
        self.assertEqual([m.planned_date for m in dinners],
                         [date(2024, 6, d) for d in range(10, 15)])
        self.assertTrue(all(m.meal_type == DINNER for m in dinners))
        self.assertNotIn("cake", {m.recipe_id for m in dinners})

    def test_same_seed_same_plan(self):
        first = self.generate(rng=random.Random(3))
        second = self.generate(rng=random.Random(3))
        self.assertEqual(first.meals, second.meals)

    def test_recently_cooked_recipes_rank_lower(self):
        history = [CookedMeal(f"main{i}", date(2024, 6, 18)) for i in range(3)]
        plan = self.generate(cooked_meals=history)
        planned = {m.recipe_id for m in plan.dinners()}
        # never-cooked recipes outscore ones made two days ago by at least 20 points
        self.assertTrue({"main3", "main4", "main5"} <= planned)

    def test_leftover_lunches(self):
        plan = self.generate(leftover_lunches=True)
        lunches = [m for m in plan.meals if m.is_leftover]
        self.assertEqual(len(lunches), 5)
        self.assertTrue(all(m.meal_type == LUNCH for m in lunches))
        self.assertEqual(lunches[-1].planned_date, date(2024, 6, 15))

    def test_count_capped_at_one_week(self):
        recipes = [make_recipe(f"dish{i}", subcategory=f"Sub{i}") for i in range(10)]
        plan = generate_weekly_plan(recipes, 10, ["Mains"], week_start=date(2024, 6, 12),
                                    rng=random.Random(1), today=self.today)
        dates = [m.planned_date for m in plan.dinners()]
        self.assertEqual(len(dates), 7)
        self.assertEqual(dates[-1], date(2024, 6, 16))

    def test_no_eligible_recipes(self):
        with self.assertRaises(NoEligibleRecipesError):
            generate_weekly_plan(self.recipes, 5, ["Breakfast"])
        self.assertTrue(issubclass(NoEligibleRecipesError, ValueError))


if __name__ == "__main__":
    unittest.main()
