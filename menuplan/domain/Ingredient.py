"""Ingredient domain entities: a parsed ingredient line and a titled group of them."""
from typing import List, Optional


class IngredientItem:
    def __init__(self, name: str = "", quantity: str = "", unit: str = "", raw: str = ""):
        self.name = name
        self.quantity = quantity or ""
        self.unit = unit or ""
        # Original line as written in the recipe
        self.raw = raw or name

    def __str__(self) -> str:
        parts = [p for p in (self.quantity, self.unit, self.name) if p]
        return " ".join(parts)

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientItem):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return IngredientItem(
            name=str(d.get("name") or ""),
            quantity=str(d.get("quantity") or ""),
            unit=str(d.get("unit") or ""),
            raw=str(d.get("raw") or ""),
        )

    def to_dict(self):
        return {
            "raw": self.raw,
            "quantity": self.quantity,
            "unit": self.unit,
            "name": self.name,
        }


class IngredientSection:
    def __init__(self, heading: str = "Main", items: Optional[List[IngredientItem]] = None):
        self.heading = heading
        self.items = items[:] if items else []

    def __str__(self) -> str:
        return f"{self.heading}: " + ", ".join(str(i) for i in self.items)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return IngredientSection(
            heading=str(d.get("heading") or "Main"),
            items=[IngredientItem.from_dict(i) for i in d.get("items", [])],
        )

    def to_dict(self):
        return {"heading": self.heading, "items": [i.to_dict() for i in self.items]}
