"""Recipe domain entity: identity, folder category, ingredient sections, nutrition numbers."""
from typing import List, Optional

from menuplan.domain.Ingredient import IngredientItem, IngredientSection
from menuplan.logic.parsing.ingredient_line import (
    extract_categories,
    parse_ingredient_line,
    parse_ingredient_sections,
    parse_number,
)


class Recipe:
    def __init__(self, id: str = "", title: str = "", category: str = "", subcategory: str = "",
                 ingredients: Optional[List[IngredientSection]] = None, servings: float = 0,
                 calories_per_serving: float = 0, net_carbs: float = 0, protein: float = 0):
        self.id = id
        self.title = title
        self.category = category
        self.subcategory = subcategory
        self.ingredients = ingredients[:] if ingredients else []
        self.servings = servings
        self.calories_per_serving = calories_per_serving
        self.net_carbs = net_carbs
        self.protein = protein

    def __str__(self) -> str:
        where = "/".join(p for p in (self.category, self.subcategory) if p)
        return f"{self.title} [{where}] - {self.servings} servings - Protein: {self.protein}g, Net carbs: {self.net_carbs}g"

    __repr__ = __str__

    def ingredient_names(self) -> List[str]:
        """Names of every ingredient across all sections, in recipe order."""
        return [item.name for section in self.ingredients for item in section.items]

    @staticmethod
    def _section_from_value(value) -> IngredientSection:
        section = IngredientSection.from_dict(value)
        # Items may be given as raw lines instead of parsed dicts
        raw_items = value.get("items", []) if isinstance(value, dict) else []
        section.items = [
            parse_ingredient_line(item) if isinstance(item, str) else IngredientItem.from_dict(item)
            for item in raw_items
        ]
        return section

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        sections = d.get("ingredients", []) or []
        if isinstance(sections, str):
            # Markdown ingredient block, optionally split by ### headings
            ingredients = parse_ingredient_sections(sections)
        else:
            # A flat list of lines is treated as a single "Main" section
            if sections and all(isinstance(s, str) for s in sections):
                sections = [{"heading": "Main", "items": sections}]
            ingredients = [Recipe._section_from_value(s) for s in sections if isinstance(s, dict)]

        category = str(d.get("category") or "")
        subcategory = str(d.get("subcategory") or "")
        file_path = d.get("file_path")
        if file_path and not (category and subcategory):
            folder_category, folder_subcategory = extract_categories(str(file_path))
            category = category or folder_category
            subcategory = subcategory or folder_subcategory

        return Recipe(
            id=str(d.get("id") or file_path or d.get("title") or ""),
            title=str(d.get("title") or ""),
            category=category,
            subcategory=subcategory,
            ingredients=ingredients,
            servings=parse_number(d.get("servings")),
            calories_per_serving=parse_number(d.get("calories_per_serving")),
            net_carbs=parse_number(d.get("net_carbs")),
            protein=parse_number(d.get("protein")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "subcategory": self.subcategory,
            "ingredients": [s.to_dict() for s in self.ingredients],
            "servings": self.servings,
            "calories_per_serving": self.calories_per_serving,
            "net_carbs": self.net_carbs,
            "protein": self.protein,
        }
