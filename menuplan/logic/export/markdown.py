"""Markdown checklist rendering of a grocery list."""
from typing import Iterable, List

from menuplan.domain.GroceryItem import GroceryItem
from menuplan.logic.shopping.categories import category_label
from menuplan.logic.shopping.list_builder import group_by_category
from menuplan.utilities.constants import DEFAULT_STORE


def format_grocery_line(item: GroceryItem) -> str:
    check = 'x' if item.checked else ' '
    store = f" @{item.store}" if item.store != DEFAULT_STORE else ''
    return f"- [{check}] {item.display_text()}{store}"


def build_grocery_markdown(items: Iterable[GroceryItem], recipe_titles: Iterable[str] = ()) -> str:
    lines: List[str] = ['# Grocery list', '']

    titles = [t for t in recipe_titles if t]
    if titles:
        lines.extend([f"**Recipes:** {', '.join(titles)}", ''])

    for category, group in group_by_category(items).items():
        lines.append(f"## {category_label(category)}")
        lines.extend(format_grocery_line(item) for item in group)
        lines.append('')

    return '\n'.join(lines)


__all__ = ['build_grocery_markdown', 'format_grocery_line']
