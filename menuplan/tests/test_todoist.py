import json
import unittest

import httpx

from menuplan.domain.GroceryItem import GroceryItem
from menuplan.infra.todoist import TODOIST_API_URL, TodoistConfigError, TodoistExporter


class FakeTodoist:
    """In-memory stand-in for the Todoist REST endpoints the exporter uses."""

    def __init__(self, projects=None, tasks=None, sections=None):
        self.projects = projects or []
        self.tasks = tasks or []
        self.sections = sections or []
        self.deleted = []
        self.created_tasks = []
        self.created_sections = []
        self.auth_headers = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.auth_headers.add(request.headers.get("Authorization"))
        path = request.url.path.replace("/rest/v2", "", 1)
        body = json.loads(request.content) if request.content else {}

        if request.method == "GET" and path == "/projects":
            return httpx.Response(200, json=self.projects)
        if request.method == "POST" and path == "/projects":
            project = {"id": "p-new", "name": body["name"]}
            self.projects.append(project)
            return httpx.Response(200, json=project)
        if request.method == "GET" and path == "/tasks":
            return httpx.Response(200, json=self.tasks)
        if request.method == "GET" and path == "/sections":
            return httpx.Response(200, json=self.sections)
        if request.method == "DELETE":
            self.deleted.append(path)
            return httpx.Response(204)
        if request.method == "POST" and path == "/sections":
            section = {"id": f"s{len(self.created_sections)}", **body}
            self.created_sections.append(section)
            return httpx.Response(200, json=section)
        if request.method == "POST" and path == "/tasks":
            self.created_tasks.append(body)
            return httpx.Response(200, json={"id": f"t{len(self.created_tasks)}", **body})
        return httpx.Response(404)


class TestTodoistExporter(unittest.TestCase):
    def setUp(self):
        self.items = [
            GroceryItem("red onion", "2", "", "produce", from_recipes=["Tacos"]),
            GroceryItem("ground beef", "1", "lb", "protein", from_recipes=["Tacos", "Chili"]),
            GroceryItem("salt", "", "", "spices"),
        ]

    def exporter(self, fake):
        client = httpx.Client(base_url=TODOIST_API_URL, transport=httpx.MockTransport(fake))
        return TodoistExporter("secret", "Grocery List", client=client)

    def test_requires_token(self):
        with self.assertRaises(TodoistConfigError):
            TodoistExporter("", "Grocery List")

    def test_creates_project_sections_and_tasks(self):
        fake = FakeTodoist()
        added = self.exporter(fake).export(self.items)

        self.assertEqual(added, 3)
        self.assertEqual(fake.auth_headers, {"Bearer secret"})
        self.assertEqual([p["name"] for p in fake.projects], ["Grocery List"])
        self.assertEqual([s["name"] for s in fake.created_sections],
                         ["Produce", "Protein and meat", "Spices and seasoning"])
        self.assertEqual([t["content"] for t in fake.created_tasks],
                         ["2 red onion", "1 lb ground beef", "salt"])
        self.assertEqual(fake.created_tasks[1]["description"], "For: Tacos, Chili")
        self.assertEqual(fake.created_tasks[1]["section_id"], "s1")
        self.assertTrue(all(t["project_id"] == "p-new" for t in fake.created_tasks))

    def test_reuses_and_clears_existing_project(self):
        fake = FakeTodoist(
            projects=[{"id": "p1", "name": "Grocery List"}],
            tasks=[{"id": "old-task"}],
            sections=[{"id": "old-section"}],
        )
        self.exporter(fake).export(self.items[:1])

        self.assertEqual(len(fake.projects), 1)
        self.assertEqual(fake.deleted, ["/tasks/old-task", "/sections/old-section"])
        self.assertEqual(fake.created_tasks[0]["project_id"], "p1")

    def test_http_errors_propagate(self):
        def failing(request):
            return httpx.Response(500)

        client = httpx.Client(base_url=TODOIST_API_URL, transport=httpx.MockTransport(failing))
        with self.assertRaises(httpx.HTTPStatusError):
            TodoistExporter("secret", "Grocery List", client=client).export(self.items)


if __name__ == "__main__":
    unittest.main()
