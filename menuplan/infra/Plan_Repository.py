import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from menuplan.domain.CookedMeal import format_date
from menuplan.domain.Plan import WeeklyPlan
from menuplan.infra import paths
from menuplan.infra.json_store import load_json, save_json
from menuplan.logic.history.stats import utc_today
from menuplan.logic.planning.selector import get_monday
from menuplan.utilities.constants import MAX_STORED_WEEKS

logger = logging.getLogger(__name__)


class PlanRepository:
    """Weekly plans stored as a JSON list, newest week first, keyed by week_start."""

    def __init__(self, file_path: Optional[Path] = None):
        self.file_path = Path(file_path) if file_path else paths.PLANS_FILE

    def _load(self) -> List[dict]:
        data = load_json(self.file_path, [])
        return data if isinstance(data, list) else []

    def list_weekly_plans(self) -> List[WeeklyPlan]:
        return [WeeklyPlan.from_dict(p) for p in self._load()]

    def get_weekly_plan(self, week_start: date) -> Optional[WeeklyPlan]:
        key = format_date(get_monday(week_start))
        for entry in self._load():
            if entry.get("week_start") == key:
                return WeeklyPlan.from_dict(entry)
        return None

    def get_current_week_plan(self, today: Optional[date] = None) -> Optional[WeeklyPlan]:
        return self.get_weekly_plan(today or utc_today())

    def save_weekly_plan(self, plan: WeeklyPlan) -> None:
        """Replace the plan for the same week (or add it), keeping only the latest weeks."""
        new_entry = plan.to_dict()
        store = [p for p in self._load() if p.get("week_start") != new_entry["week_start"]]
        store.append(new_entry)
        # ISO dates sort correctly as strings
        store.sort(key=lambda p: p.get("week_start") or "", reverse=True)
        if len(store) > MAX_STORED_WEEKS:
            dropped = [p.get("week_start") for p in store[MAX_STORED_WEEKS:]]
            logger.info(f"Dropping old weekly plans: {dropped}")
            store = store[:MAX_STORED_WEEKS]
        save_json(self.file_path, store)
