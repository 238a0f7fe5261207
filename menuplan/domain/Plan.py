"""Plan domain entities: a planned meal slot and the Monday-anchored weekly plan."""
from datetime import date, datetime, timezone
from typing import List, Optional

from menuplan.domain.CookedMeal import format_date, parse_date
from menuplan.utilities.constants import DINNER


class PlannedMeal:
    def __init__(self, recipe_id: str, planned_date: date, meal_type: str = DINNER, servings: float = 1,
                 is_leftover: bool = False, leftover_source_date: Optional[date] = None):
        self.recipe_id = recipe_id
        self.planned_date = planned_date
        self.meal_type = meal_type
        self.servings = servings
        self.is_leftover = is_leftover
        self.leftover_source_date = leftover_source_date

    def __str__(self) -> str:
        suffix = f" (leftover from {format_date(self.leftover_source_date)})" if self.is_leftover else ""
        return f"{format_date(self.planned_date)} {self.meal_type}: {self.recipe_id} x{self.servings}{suffix}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlannedMeal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PlannedMeal(
            recipe_id=str(d.get("recipe_id") or ""),
            planned_date=parse_date(d.get("planned_date")),
            meal_type=str(d.get("meal_type") or DINNER),
            servings=d.get("servings", 1),
            is_leftover=bool(d.get("is_leftover", False)),
            leftover_source_date=parse_date(d.get("leftover_source_date")),
        )

    def to_dict(self):
        data = {
            "recipe_id": self.recipe_id,
            "planned_date": format_date(self.planned_date),
            "meal_type": self.meal_type,
            "servings": self.servings,
        }
        if self.is_leftover:
            data["is_leftover"] = True
            data["leftover_source_date"] = format_date(self.leftover_source_date)
        return data


class WeeklyPlan:
    def __init__(self, week_start: date, meals: Optional[List[PlannedMeal]] = None,
                 generated_at: Optional[datetime] = None):
        self.week_start = week_start
        self.meals = meals[:] if meals else []
        self.generated_at = generated_at or datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"Week of {format_date(self.week_start)}: {len(self.meals)} meals"

    __repr__ = __str__

    def dinners(self) -> List[PlannedMeal]:
        return [m for m in self.meals if not m.is_leftover and m.meal_type == DINNER]

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        generated_at = d.get("generated_at")
        if isinstance(generated_at, str) and generated_at:
            try:
                generated_at = datetime.fromisoformat(generated_at.replace("Z", "+00:00"))
            except ValueError:
                generated_at = None
        elif not isinstance(generated_at, datetime):
            generated_at = None
        return WeeklyPlan(
            week_start=parse_date(d.get("week_start")),
            meals=[PlannedMeal.from_dict(m) for m in d.get("meals", [])],
            generated_at=generated_at,
        )

    def to_dict(self):
        return {
            "week_start": format_date(self.week_start),
            "meals": [m.to_dict() for m in self.meals],
            "generated_at": self.generated_at.isoformat(),
        }
