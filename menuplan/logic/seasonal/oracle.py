"""Seasonal ingredient awareness for meal planning.

Maps common produce and a few proteins to their peak months (US temperate
availability, 1=Jan .. 12=Dec). Entries covering all twelve months are
year-round staples: they are recognised but never count as "seasonal".
"""
from datetime import date
from typing import Callable, Dict, FrozenSet, List, Optional

from menuplan.logic.history.stats import utc_today

ALL_YEAR = frozenset(range(1, 13))


class SeasonalEntry:
    def __init__(self, months, category: str):
        self.months: FrozenSet[int] = frozenset(months)
        self.category = category

    @property
    def year_round(self) -> bool:
        return len(self.months) >= 12

    def __repr__(self) -> str:
        return f"SeasonalEntry({sorted(self.months)}, {self.category!r})"


def _e(months, category):
    return SeasonalEntry(months, category)


# Declaration order matters: partial lookups return the first key that matches.
SEASONAL_DATA: Dict[str, SeasonalEntry] = {
    # Spring (Mar-May)
    'asparagus': _e([3, 4, 5], 'vegetable'),
    'artichoke': _e([3, 4, 5], 'vegetable'),
    'pea': _e([3, 4, 5, 6], 'vegetable'),
    'peas': _e([3, 4, 5, 6], 'vegetable'),
    'radish': _e([3, 4, 5], 'vegetable'),
    'rhubarb': _e([4, 5, 6], 'fruit'),
    'strawberry': _e([4, 5, 6], 'fruit'),
    'strawberries': _e([4, 5, 6], 'fruit'),

    # Summer (Jun-Aug)
    'tomato': _e([6, 7, 8, 9], 'vegetable'),
    'tomatoes': _e([6, 7, 8, 9], 'vegetable'),
    'cherry tomato': _e([6, 7, 8, 9], 'vegetable'),
    'cherry tomatoes': _e([6, 7, 8, 9], 'vegetable'),
    'zucchini': _e([6, 7, 8], 'vegetable'),
    'corn': _e([6, 7, 8, 9], 'vegetable'),
    'bell pepper': _e([6, 7, 8, 9], 'vegetable'),
    'bell peppers': _e([6, 7, 8, 9], 'vegetable'),
    'cucumber': _e([5, 6, 7, 8], 'vegetable'),
    'eggplant': _e([7, 8, 9], 'vegetable'),
    'green bean': _e([6, 7, 8], 'vegetable'),
    'green beans': _e([6, 7, 8], 'vegetable'),
    'peach': _e([6, 7, 8], 'fruit'),
    'peaches': _e([6, 7, 8], 'fruit'),
    'blueberry': _e([6, 7, 8], 'fruit'),
    'blueberries': _e([6, 7, 8], 'fruit'),
    'raspberry': _e([6, 7, 8], 'fruit'),
    'raspberries': _e([6, 7, 8], 'fruit'),
    'watermelon': _e([6, 7, 8], 'fruit'),
    'cantaloupe': _e([6, 7, 8], 'fruit'),
    'basil': _e([6, 7, 8, 9], 'herb'),
    'cilantro': _e([5, 6, 9, 10], 'herb'),
    'jalapeño': _e([6, 7, 8, 9], 'vegetable'),
    'okra': _e([6, 7, 8, 9], 'vegetable'),
    'avocado': _e([3, 4, 5, 6, 7, 8], 'fruit'),

    # Fall (Sep-Nov)
    'apple': _e([9, 10, 11], 'fruit'),
    'apples': _e([9, 10, 11], 'fruit'),
    'pumpkin': _e([9, 10, 11], 'vegetable'),
    'sweet potato': _e([9, 10, 11, 12], 'vegetable'),
    'sweet potatoes': _e([9, 10, 11, 12], 'vegetable'),
    'butternut squash': _e([9, 10, 11], 'vegetable'),
    'squash': _e([9, 10, 11], 'vegetable'),
    'spaghetti squash': _e([9, 10, 11], 'vegetable'),
    'brussels sprout': _e([9, 10, 11, 12], 'vegetable'),
    'brussels sprouts': _e([9, 10, 11, 12], 'vegetable'),
    'cranberry': _e([10, 11, 12], 'fruit'),
    'cranberries': _e([10, 11, 12], 'fruit'),
    'pear': _e([9, 10, 11], 'fruit'),
    'pears': _e([9, 10, 11], 'fruit'),
    'fig': _e([8, 9, 10], 'fruit'),
    'figs': _e([8, 9, 10], 'fruit'),
    'grape': _e([8, 9, 10], 'fruit'),
    'grapes': _e([8, 9, 10], 'fruit'),
    'cauliflower': _e([9, 10, 11], 'vegetable'),
    'turnip': _e([10, 11, 12], 'vegetable'),
    'parsnip': _e([10, 11, 12, 1, 2], 'vegetable'),

    # Winter (Dec-Feb)
    'citrus': _e([12, 1, 2, 3], 'fruit'),
    'orange': _e([12, 1, 2, 3], 'fruit'),
    'oranges': _e([12, 1, 2, 3], 'fruit'),
    'grapefruit': _e([12, 1, 2, 3], 'fruit'),
    'lemon': _e([12, 1, 2, 3], 'fruit'),
    'lemons': _e([12, 1, 2, 3], 'fruit'),
    'lime': _e([5, 6, 7, 8, 9, 10], 'fruit'),
    'kale': _e([10, 11, 12, 1, 2, 3], 'vegetable'),
    'collard greens': _e([11, 12, 1, 2], 'vegetable'),
    'cabbage': _e([10, 11, 12, 1, 2, 3], 'vegetable'),
    'beet': _e([6, 7, 8, 9, 10], 'vegetable'),
    'beets': _e([6, 7, 8, 9, 10], 'vegetable'),
    'celery': _e([9, 10, 11], 'vegetable'),
    'pomegranate': _e([10, 11, 12, 1], 'fruit'),

    # Year-round staples (recognised, never a bonus)
    'onion': _e(ALL_YEAR, 'vegetable'),
    'red onion': _e(ALL_YEAR, 'vegetable'),
    'garlic': _e(ALL_YEAR, 'vegetable'),
    'potato': _e(ALL_YEAR, 'vegetable'),
    'potatoes': _e(ALL_YEAR, 'vegetable'),
    'carrot': _e(ALL_YEAR, 'vegetable'),
    'carrots': _e(ALL_YEAR, 'vegetable'),
    'spinach': _e([3, 4, 5, 9, 10, 11], 'vegetable'),
    'lettuce': _e([3, 4, 5, 9, 10, 11], 'vegetable'),
    'broccoli': _e([10, 11, 12, 1, 2, 3], 'vegetable'),
    'mushroom': _e([9, 10, 11, 12, 1, 2, 3], 'vegetable'),
    'mushrooms': _e([9, 10, 11, 12, 1, 2, 3], 'vegetable'),
    'ginger': _e(ALL_YEAR, 'spice'),

    # Proteins
    'shrimp': _e([4, 5, 6, 7, 8, 9, 10], 'seafood'),
    'salmon': _e([5, 6, 7, 8, 9], 'seafood'),
    'crab': _e([10, 11, 12, 1], 'seafood'),
}

Matcher = Callable[[str, Dict[str, SeasonalEntry]], Optional[SeasonalEntry]]


def first_match(ingredient_name: str, table: Dict[str, SeasonalEntry]) -> Optional[SeasonalEntry]:
    """Exact key first, then the first declared key contained in the name (or containing it).

    Not the most specific key: "key lime pie" resolves to whatever matches first.
    """
    lower = (ingredient_name or "").lower().strip()
    if not lower:
        return None
    if lower in table:
        return table[lower]
    for key, entry in table.items():
        if key in lower or lower in key:
            return entry
    return None


def get_season_label(month: int) -> str:
    if 3 <= month <= 5:
        return 'Spring'
    if 6 <= month <= 8:
        return 'Summer'
    if 9 <= month <= 11:
        return 'Fall'
    return 'Winter'


class SeasonalHelper:
    def __init__(self, matcher: Optional[Matcher] = None, table: Optional[Dict[str, SeasonalEntry]] = None,
                 today: Optional[Callable[[], date]] = None):
        self.matcher = matcher or first_match
        self.table = table if table is not None else SEASONAL_DATA
        self._today = today or utc_today

    def get_current_month(self) -> int:
        return self._today().month

    def _month(self, month: Optional[int]) -> int:
        return month if month is not None else self.get_current_month()

    def find_entry(self, ingredient_name: str) -> Optional[SeasonalEntry]:
        return self.matcher(ingredient_name, self.table)

    def _seasonal_entry(self, ingredient_name: str) -> Optional[SeasonalEntry]:
        entry = self.find_entry(ingredient_name)
        if entry is None or entry.year_round:
            return None
        return entry

    def is_in_season(self, ingredient_name: str, month: Optional[int] = None) -> bool:
        entry = self._seasonal_entry(ingredient_name)
        return entry is not None and self._month(month) in entry.months

    def get_recipe_seasonal_score(self, ingredient_names: List[str], month: Optional[int] = None) -> float:
        """Share of the recipe's seasonal ingredients that are in season (0-1).

        0.5 when nothing in the list is seasonal, so "no signal" stays
        distinct from "everything out of season".
        """
        m = self._month(month)
        seasonal_total = 0
        seasonal_count = 0
        for name in ingredient_names:
            entry = self._seasonal_entry(name)
            if entry is None:
                continue
            seasonal_total += 1
            if m in entry.months:
                seasonal_count += 1
        if seasonal_total == 0:
            return 0.5
        return seasonal_count / seasonal_total

    def get_in_season_ingredients(self, ingredient_names: List[str], month: Optional[int] = None) -> List[str]:
        m = self._month(month)
        return [name for name in ingredient_names if self.is_in_season(name, m)]

    def get_out_of_season_ingredients(self, ingredient_names: List[str], month: Optional[int] = None) -> List[str]:
        m = self._month(month)
        out = []
        for name in ingredient_names:
            entry = self._seasonal_entry(name)
            if entry is not None and m not in entry.months:
                out.append(name)
        return out

    def get_season_label(self, month: Optional[int] = None) -> str:
        return get_season_label(self._month(month))

    def in_season_keywords(self, month: Optional[int] = None) -> List[str]:
        """Table keywords that are seasonal and in season for the month."""
        m = self._month(month)
        return [key for key, entry in self.table.items() if not entry.year_round and m in entry.months]


__all__ = ['SEASONAL_DATA', 'SeasonalEntry', 'SeasonalHelper', 'first_match', 'get_season_label']
