"""Ingredient -> grocery category and ingredient -> store lookups.

Explicit assignments (keyed by lowercase ingredient name) win; categories
otherwise fall back to a keyword guess, stores to "Any".
"""
from typing import Dict, Optional

from menuplan.utilities.constants import CATEGORY_LABELS, CATEGORY_ORDER, DEFAULT_STORE

# Checked in this order, first hit wins (so "black pepper" is produce, not spices)
CATEGORY_KEYWORDS = (
    ('produce', ('avocado', 'tomato', 'onion', 'garlic', 'cilantro', 'lime', 'lemon',
                 'pepper', 'lettuce', 'spinach', 'broccoli', 'carrot', 'celery', 'cucumber',
                 'jalapeño', 'ginger', 'basil', 'rosemary', 'thyme', 'parsley', 'scallion',
                 'cherry tomato', 'red onion', 'green onion', 'bell pepper', 'zucchini',
                 'squash', 'potato', 'sweet potato', 'mushroom', 'corn', 'cabbage', 'kale')),
    ('protein', ('chicken', 'beef', 'pork', 'shrimp', 'salmon', 'fish', 'turkey',
                 'sausage', 'bacon', 'tenderloin', 'ground', 'steak', 'roast')),
    ('dairy', ('cheese', 'cream cheese', 'milk', 'butter', 'yogurt', 'sour cream',
               'cream', 'cheddar', 'mozzarella', 'parmesan', 'feta', 'cottage cheese', 'egg')),
    ('spices', ('salt', 'pepper', 'cumin', 'paprika', 'chili powder', 'oregano',
                'cinnamon', 'nutmeg', 'cayenne', 'turmeric', 'garlic powder', 'onion powder')),
    ('bakery', ('tortilla', 'bread', 'bun', 'roll', 'pita', 'naan', 'wrap')),
    ('frozen', ('frozen',)),
)


def guess_category(name: str) -> str:
    lower = (name or '').lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in lower for k in keywords):
            return category
    return 'pantry'


def category_order(category: str) -> int:
    return CATEGORY_ORDER.get(category, 99)


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


class IngredientDirectory:
    def __init__(self, categories: Optional[Dict[str, str]] = None, stores: Optional[Dict[str, str]] = None):
        self.categories = {k.lower(): v for k, v in (categories or {}).items()}
        self.stores = {k.lower(): v for k, v in (stores or {}).items()}

    def get_category(self, name: str) -> str:
        return self.categories.get((name or '').lower()) or guess_category(name)

    def get_store(self, name: str) -> str:
        return self.stores.get((name or '').lower()) or DEFAULT_STORE

    def set_category(self, name: str, category: str):
        if category not in CATEGORY_ORDER:
            raise ValueError(f"Unknown grocery category: {category}")
        self.categories[name.lower()] = category

    def set_store(self, name: str, store: str):
        self.stores[name.lower()] = store

    def to_dict(self):
        return {"categories": dict(self.categories), "stores": dict(self.stores)}

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return IngredientDirectory(d.get("categories") or {}, d.get("stores") or {})


__all__ = ['IngredientDirectory', 'guess_category', 'category_order', 'category_label']
