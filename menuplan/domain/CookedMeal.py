"""Cooking history entries and the per-recipe stats derived from them."""
from datetime import date, datetime
from typing import Optional

from menuplan.utilities.constants import DATE_FORMAT, DINNER


def parse_date(value) -> Optional[date]:
    '''Accepts a date, datetime or ISO "YYYY-MM-DD" string; returns None if unparseable.'''
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.strptime(value[:10], DATE_FORMAT).date()
        except ValueError:
            return None
    return None


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(DATE_FORMAT) if value else None


class CookedMeal:
    def __init__(self, recipe_id: str, cooked_date: date, meal_type: str = DINNER, notes: str = ""):
        self.recipe_id = recipe_id
        self.cooked_date = cooked_date
        self.meal_type = meal_type
        self.notes = notes

    def __str__(self) -> str:
        return f"{self.recipe_id} cooked {format_date(self.cooked_date)} ({self.meal_type})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return CookedMeal(
            recipe_id=str(d.get("recipe_id") or ""),
            cooked_date=parse_date(d.get("cooked_date")),
            meal_type=str(d.get("meal_type") or DINNER),
            notes=str(d.get("notes") or ""),
        )

    def to_dict(self):
        data = {
            "recipe_id": self.recipe_id,
            "cooked_date": format_date(self.cooked_date),
            "meal_type": self.meal_type,
        }
        if self.notes:
            data["notes"] = self.notes
        return data


class RecipeStats:
    def __init__(self, recipe_id: str, last_cooked: Optional[date] = None, times_cooked: int = 0,
                 days_since_last_made: Optional[int] = None):
        self.recipe_id = recipe_id
        self.last_cooked = last_cooked
        self.times_cooked = times_cooked
        self.days_since_last_made = days_since_last_made

    def __str__(self) -> str:
        if self.last_cooked is None:
            return f"{self.recipe_id}: never cooked"
        return (f"{self.recipe_id}: cooked {self.times_cooked} times, "
                f"last {format_date(self.last_cooked)} ({self.days_since_last_made} days ago)")

    __repr__ = __str__

    def to_dict(self):
        return {
            "recipe_id": self.recipe_id,
            "last_cooked": format_date(self.last_cooked),
            "times_cooked": self.times_cooked,
            "days_since_last_made": self.days_since_last_made,
        }
