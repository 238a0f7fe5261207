"""Grocery list export to a Todoist project (REST v2).

The project is emptied first, then one section per grocery category and one
task per item are created.
"""
import logging
from typing import Iterable, Optional

import httpx

from menuplan.domain.GroceryItem import GroceryItem
from menuplan.logic.shopping.categories import category_label
from menuplan.logic.shopping.list_builder import group_by_category

logger = logging.getLogger(__name__)

TODOIST_API_URL = "https://api.todoist.com/rest/v2"


class TodoistConfigError(RuntimeError):
    """Raised when no API token is configured."""


class TodoistExporter:
    def __init__(self, token: str, project_name: str, client: Optional[httpx.Client] = None):
        if not token:
            raise TodoistConfigError("Todoist API token not configured. Set TODOIST_API_TOKEN.")
        self.project_name = project_name
        self._client = client or httpx.Client(base_url=TODOIST_API_URL, timeout=15.0)
        self._headers = {"Authorization": f"Bearer {token}"}

    def _request(self, method: str, path: str, **kwargs):
        resp = self._client.request(method, path, headers=self._headers, **kwargs)
        resp.raise_for_status()
        return resp.json() if resp.content else None

    def get_or_create_project(self) -> str:
        for project in self._request("GET", "/projects") or []:
            if project.get("name") == self.project_name:
                return project["id"]
        created = self._request("POST", "/projects", json={"name": self.project_name})
        logger.info(f"Created Todoist project {self.project_name!r}")
        return created["id"]

    def clear_project(self, project_id: str) -> None:
        for task in self._request("GET", "/tasks", params={"project_id": project_id}) or []:
            self._request("DELETE", f"/tasks/{task['id']}")
        for section in self._request("GET", "/sections", params={"project_id": project_id}) or []:
            self._request("DELETE", f"/sections/{section['id']}")

    def export(self, items: Iterable[GroceryItem]) -> int:
        """Replace the project's contents with the grocery list; returns the number of tasks added."""
        project_id = self.get_or_create_project()
        self.clear_project(project_id)

        added = 0
        for category, group in group_by_category(items).items():
            section = self._request("POST", "/sections",
                                    json={"project_id": project_id, "name": category_label(category)})
            for item in group:
                self._request("POST", "/tasks", json={
                    "content": item.display_text(),
                    "description": f"For: {', '.join(item.from_recipes)}" if item.from_recipes else "",
                    "project_id": project_id,
                    "section_id": section["id"],
                })
                added += 1
        logger.info(f"Sent {added} items to Todoist project {self.project_name!r}")
        return added

    def close(self):
        self._client.close()
