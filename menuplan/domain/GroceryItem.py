"""GroceryItem domain entity: one consolidated line of the shopping list."""
from typing import List, Optional

from menuplan.utilities.constants import DEFAULT_STORE


class GroceryItem:
    def __init__(self, name: str, quantity: str = "", unit: str = "", category: str = "other",
                 store: str = DEFAULT_STORE, from_recipes: Optional[List[str]] = None, checked: bool = False):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.store = store
        self.from_recipes = from_recipes[:] if from_recipes else []
        # UI state only, never touched by consolidation
        self.checked = checked

    def display_text(self) -> str:
        '''"2 cups rice" style label; quantity and unit are omitted when empty.'''
        qty = f"{self.quantity}{' ' + self.unit if self.unit else ''} " if self.quantity else ""
        return f"{qty}{self.name}"

    def __str__(self) -> str:
        return f"{self.display_text()} [{self.category} @ {self.store}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return GroceryItem(
            name=str(d.get("name") or ""),
            quantity=str(d.get("quantity") or ""),
            unit=str(d.get("unit") or ""),
            category=str(d.get("category") or "other"),
            store=str(d.get("store") or DEFAULT_STORE),
            from_recipes=list(d.get("from_recipes", [])),
            checked=bool(d.get("checked", False)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "store": self.store,
            "from_recipes": self.from_recipes,
            "checked": self.checked,
        }
