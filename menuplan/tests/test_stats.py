import unittest
from datetime import date

from menuplan.domain.CookedMeal import CookedMeal
from menuplan.logic.history.stats import get_all_recipe_stats, get_recipe_stats


class TestRecipeStats(unittest.TestCase):
    def setUp(self):
        self.today = date(2024, 6, 20)
        self.history = [
            CookedMeal("tacos", date(2024, 6, 1)),
            CookedMeal("tacos", date(2024, 6, 10)),
            CookedMeal("tacos", date(2024, 5, 2)),
            CookedMeal("soup", date(2024, 6, 19)),
        ]

    def test_never_cooked(self):
        stats = get_recipe_stats("chili", self.history, self.today)
        self.assertIsNone(stats.last_cooked)
        self.assertEqual(stats.times_cooked, 0)
        self.assertIsNone(stats.days_since_last_made)

    def test_last_cooked_is_latest_entry(self):
        stats = get_recipe_stats("tacos", self.history, self.today)
        self.assertEqual(stats.last_cooked, date(2024, 6, 10))
        self.assertEqual(stats.times_cooked, 3)
        self.assertEqual(stats.days_since_last_made, 10)

    def test_all_stats_keyed_by_id(self):
        stats = get_all_recipe_stats(["tacos", "soup", "chili"], iter(self.history), self.today)
        self.assertEqual(set(stats), {"tacos", "soup", "chili"})
        self.assertEqual(stats["soup"].days_since_last_made, 1)
        self.assertEqual(stats["chili"].times_cooked, 0)

    def test_to_dict(self):
        data = get_recipe_stats("soup", self.history, self.today).to_dict()
        self.assertEqual(data, {
            "recipe_id": "soup",
            "last_cooked": "2024-06-19",
            "times_cooked": 1,
            "days_since_last_made": 1,
        })


if __name__ == "__main__":
    unittest.main()
