"""Grocery list builder.

Consolidates the ingredients of several recipes into one shopping list:
same-named items (case-insensitive) are merged, their quantities combined
and the contributing recipe titles collected.
Provides generate_grocery_list(recipes, category_lookup, store_lookup).
"""
import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from menuplan.domain.GroceryItem import GroceryItem
from menuplan.domain.Plan import WeeklyPlan
from menuplan.domain.Recipe import Recipe
from menuplan.logic.shopping.categories import IngredientDirectory, category_order
from menuplan.logic.shopping.quantities import combine_quantities
from menuplan.utilities.constants import OPTIONAL_SECTION_KEYWORD

logger = logging.getLogger(__name__)

Lookup = Callable[[str], str]


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def _is_optional_section(heading: str) -> bool:
    return OPTIONAL_SECTION_KEYWORD in (heading or '').lower()


def generate_grocery_list(recipes: Iterable[Recipe], category_lookup: Optional[Lookup] = None,
                          store_lookup: Optional[Lookup] = None) -> List[GroceryItem]:
    """Build a consolidated grocery list.

    Args:
        recipes: recipes to shop for (usually the week's dinners).
        category_lookup: ingredient name -> grocery category.
        store_lookup: ingredient name -> store name.

    Returns:
        GroceryItems sorted by category shopping order, then by name.
    """
    if category_lookup is None or store_lookup is None:
        directory = IngredientDirectory()
        category_lookup = category_lookup or directory.get_category
        store_lookup = store_lookup or directory.get_store

    consolidated: Dict[str, GroceryItem] = {}
    for recipe in recipes:
        for section in recipe.ingredients:
            # "Sides (if applicable)" and similar are optional suggestions
            if _is_optional_section(section.heading):
                continue
            for item in section.items:
                key = _normalize(item.name)
                if not key:
                    continue
                existing = consolidated.get(key)
                if existing is None:
                    consolidated[key] = GroceryItem(
                        name=item.name,
                        quantity=item.quantity or '',
                        unit=item.unit or '',
                        category=category_lookup(item.name),
                        store=store_lookup(item.name),
                        from_recipes=[recipe.title],
                    )
                    continue
                existing.quantity = combine_quantities(existing.quantity, item.quantity, existing.unit, item.unit)
                if recipe.title not in existing.from_recipes:
                    existing.from_recipes.append(recipe.title)

    items = list(consolidated.values())
    items.sort(key=lambda i: (category_order(i.category), i.name.lower()))
    return items


def recipes_for_plan(plan: WeeklyPlan, recipe_lookup: Mapping[str, Recipe]) -> List[Recipe]:
    """Recipe of every planned dinner, in plan order. Unknown ids are skipped.

    A recipe planned for two dinners appears twice, so its quantities count twice.
    """
    recipes: List[Recipe] = []
    for meal in plan.dinners():
        recipe = recipe_lookup.get(meal.recipe_id)
        if recipe is None:
            logger.warning("Planned recipe %s not found in catalog, left off the grocery list", meal.recipe_id)
            continue
        recipes.append(recipe)
    return recipes


def _group_by(items: Iterable[GroceryItem], attr: str) -> Dict[str, List[GroceryItem]]:
    groups: Dict[str, List[GroceryItem]] = {}
    for item in items:
        groups.setdefault(getattr(item, attr), []).append(item)
    return groups


def group_by_category(items: Iterable[GroceryItem]) -> Dict[str, List[GroceryItem]]:
    return _group_by(items, 'category')


def group_by_store(items: Iterable[GroceryItem]) -> Dict[str, List[GroceryItem]]:
    return _group_by(items, 'store')


__all__ = ['generate_grocery_list', 'recipes_for_plan', 'group_by_category', 'group_by_store']
