import unittest
from datetime import datetime, timedelta

from api_support import make_client, reset_overrides
from blockly.models.task import Task


class TestTasksApi(unittest.TestCase):
    def setUp(self) -> None:
        self.client, self.Session = make_client()

    def tearDown(self) -> None:
        reset_overrides()

    def _task(self, title: str, due_date=None) -> dict:
        resp = self.client.post("/tasks", json={"title": title, "due_date": due_date})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_ordering_and_filters(self) -> None:
        self._task("undated")
        later = self._task("later", "2024-03-10")
        self._task("sooner", "2024-03-01")
        self.client.post(f"/tasks/{later['id']}/toggle")

        body = self.client.get("/tasks").json()
        self.assertEqual([t["title"] for t in body["tasks"]], ["sooner", "undated", "later"])
        self.assertEqual((body["active_count"], body["completed_count"]), (2, 1))

        active = self.client.get("/tasks", params={"filter": "active"}).json()["tasks"]
        self.assertEqual([t["title"] for t in active], ["sooner", "undated"])
        done = self.client.get("/tasks", params={"filter": "completed"}).json()["tasks"]
        self.assertEqual([t["title"] for t in done], ["later"])

        self.assertEqual(self.client.get("/tasks", params={"filter": "bogus"}).status_code, 422)

    def test_due_date_filter(self) -> None:
        self._task("a", "2024-03-01")
        self._task("b", "2024-03-02")
        got = self.client.get("/tasks", params={"due_date": "2024-03-02"}).json()["tasks"]
        self.assertEqual([t["title"] for t in got], ["b"])

    def test_toggle_sets_and_clears_completed_at(self) -> None:
        t = self._task("read chapter 4")
        done = self.client.post(f"/tasks/{t['id']}/toggle").json()["task"]
        self.assertTrue(done["is_completed"])
        self.assertIsNotNone(done["completed_at"])

        undone = self.client.post(f"/tasks/{t['id']}/toggle").json()["task"]
        self.assertFalse(undone["is_completed"])
        self.assertIsNone(undone["completed_at"])

    def test_auto_cleanup_removes_old_completed(self) -> None:
        with self.Session() as db:
            db.add(Task(title="ancient", is_completed=True, completed_at=datetime.now() - timedelta(days=45)))
            db.add(Task(title="recent", is_completed=True, completed_at=datetime.now() - timedelta(days=2)))
            db.commit()

        t = self._task("new")
        resp = self.client.post(f"/tasks/{t['id']}/toggle", params={"auto_cleanup": "true"}).json()
        self.assertEqual(resp["cleaned_up"], 1)
        titles = sorted(x["title"] for x in self.client.get("/tasks").json()["tasks"])
        self.assertEqual(titles, ["new", "recent"])

    def test_update_and_delete(self) -> None:
        t = self._task("draft")
        resp = self.client.put(f"/tasks/{t['id']}", json={"title": "final", "due_date": "2024-05-01"})
        self.assertEqual(resp.json()["title"], "final")
        self.assertEqual(resp.json()["due_date"], "2024-05-01")

        self.assertEqual(self.client.delete(f"/tasks/{t['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/tasks/{t['id']}").status_code, 404)

    def test_clear_completed(self) -> None:
        a = self._task("a")
        self._task("b")
        self.client.post(f"/tasks/{a['id']}/toggle")
        self.assertEqual(self.client.delete("/tasks/completed").json(), {"deleted": 1})
        self.assertEqual([t["title"] for t in self.client.get("/tasks").json()["tasks"]], ["b"])

    def test_unknown_block_rejected(self) -> None:
        resp = self.client.post("/tasks", json={"title": "x", "schedule_block_id": "missing"})
        self.assertEqual(resp.status_code, 400)


if __name__ == "__main__":
    unittest.main(verbosity=2)
