import unittest
from datetime import date

from menuplan.domain.Plan import PlannedMeal
from menuplan.domain.Recipe import Recipe
from menuplan.logic.planning.leftovers import derive_leftovers, generate_leftover_lunches, sort_meals
from menuplan.utilities.constants import DINNER, LUNCH

MONDAY = date(2024, 6, 10)
TUESDAY = date(2024, 6, 11)


def dinner(recipe_id, day, servings=4):
    return PlannedMeal(recipe_id, day, DINNER, servings)


class TestLeftoverLunches(unittest.TestCase):
    def setUp(self):
        self.lookup = {
            "big": Recipe(id="big", title="Big Chili", servings=6),
            "family": Recipe(id="family", title="Family Tacos", servings=4),
            "small": Recipe(id="small", title="Steak for Two", servings=2),
        }

    def test_six_servings_merge_into_one_lunch(self):
        lunches = generate_leftover_lunches([dinner("big", MONDAY, 6)], self.lookup)
        self.assertEqual(len(lunches), 1)
        lunch = lunches[0]
        self.assertEqual(lunch.recipe_id, "big")
        self.assertEqual(lunch.planned_date, TUESDAY)
        self.assertEqual(lunch.meal_type, LUNCH)
        self.assertEqual(lunch.servings, 2)
        self.assertTrue(lunch.is_leftover)
        self.assertEqual(lunch.leftover_source_date, MONDAY)

    def test_four_servings_give_one_lunch(self):
        lunches = generate_leftover_lunches([dinner("family", MONDAY)], self.lookup)
        self.assertEqual([m.servings for m in lunches], [1])

    def test_small_recipes_have_no_leftovers(self):
        self.assertEqual(generate_leftover_lunches([dinner("small", MONDAY, 2)], self.lookup), [])

    def test_unknown_recipe_is_skipped(self):
        self.assertEqual(generate_leftover_lunches([dinner("ghost", MONDAY)], self.lookup), [])

    def test_servings_come_from_recipe(self):
        # planned servings do not drive leftovers, the recipe yield does
        lunches = generate_leftover_lunches([dinner("big", MONDAY, 1)], self.lookup)
        self.assertEqual(lunches[0].servings, 2)

    def test_derive_orders_dinner_before_leftover(self):
        dinners = [dinner("family", MONDAY), dinner("big", TUESDAY, 6)]
        meals = derive_leftovers(dinners, self.lookup)
        self.assertEqual(
            [(m.planned_date, m.meal_type, m.recipe_id) for m in meals],
            [
                (MONDAY, DINNER, "family"),
                (TUESDAY, DINNER, "big"),
                (TUESDAY, LUNCH, "family"),
                (date(2024, 6, 12), LUNCH, "big"),
            ],
        )

    def test_derive_disabled(self):
        dinners = [dinner("big", TUESDAY), dinner("family", MONDAY)]
        meals = derive_leftovers(dinners, self.lookup, leftover_enabled=False)
        self.assertEqual([m.recipe_id for m in meals], ["family", "big"])

    def test_sort_is_stable_within_a_day(self):
        a = dinner("a", MONDAY)
        b = dinner("b", MONDAY)
        self.assertEqual(sort_meals([b, a]), [b, a])


if __name__ == "__main__":
    unittest.main()
