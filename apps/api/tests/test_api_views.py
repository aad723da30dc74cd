import unittest

from api_support import make_client, reset_overrides


class TestViewsApi(unittest.TestCase):
    def setUp(self) -> None:
        self.client, self.Session = make_client()
        created = self.client.post("/schedule-types/templates/ab-block").json()["schedule_types"]
        self.day_a, self.day_b = created

    def tearDown(self) -> None:
        reset_overrides()

    def test_day_view_timeline(self) -> None:
        resp = self.client.get("/views/day/2024-01-02", params={"now": "2024-01-02T09:00:00"})
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["schedule_type"]["name"], "Day B")
        self.assertTrue(body["is_today"])
        self.assertEqual(body["timeline"]["current_block_id"], self.day_b["blocks"][0]["id"])
        self.assertIsNone(body["timeline"]["next_block_id"])
        self.assertEqual(body["timeline"]["progress_percent"], 14)
        self.assertEqual(body["greeting"], "Good morning")

    def test_day_view_lists_tasks_for_that_day(self) -> None:
        self.client.post("/tasks", json={"title": "quiz", "due_date": "2024-01-02"})
        self.client.post("/tasks", json={"title": "other", "due_date": "2024-01-03"})
        body = self.client.get("/views/day/2024-01-02", params={"now": "2024-01-05T10:00:00"}).json()
        self.assertEqual([t["title"] for t in body["tasks"]], ["quiz"])
        self.assertIsNone(body["timeline"])

    def test_weekend_day(self) -> None:
        self.client.put("/overrides/2024-01-06", json={"schedule_type_id": self.day_a["id"]})
        body = self.client.get("/views/day/2024-01-06").json()
        self.assertTrue(body["is_weekend"])
        self.assertTrue(body["has_override"])
        self.assertIsNone(body["schedule_type"])
        self.assertEqual(body["blocks"], [])

    def test_override_and_default_preference(self) -> None:
        self.client.post("/overrides/2024-01-03/holiday")
        body = self.client.get("/views/day/2024-01-03").json()
        self.assertTrue(body["is_holiday"])

        body = self.client.get("/views/day/2024-01-02", params={"default_schedule_id": self.day_a["id"]}).json()
        self.assertEqual(body["schedule_type"]["id"], self.day_a["id"])

    def test_time_labels_follow_preference(self) -> None:
        body = self.client.get("/views/day/2024-01-01", params={"use_24h": "true"}).json()
        self.assertEqual(body["blocks"][-1]["end_label"], "15:05")
        body = self.client.get("/views/day/2024-01-01").json()
        self.assertEqual(body["blocks"][-1]["end_label"], "3:05 PM")

    def test_week_view(self) -> None:
        body = self.client.get("/views/week/2024-01-03").json()
        self.assertEqual([d["date"] for d in body["days"]][0], "2024-01-01")
        self.assertEqual(
            [d["schedule_type"]["name"] for d in body["days"]],
            ["Day A", "Day B", "Day A", "Day B", "Day A"],
        )

        body = self.client.get("/views/week/2024-01-03", params={"show_weekends": "true"}).json()
        self.assertEqual(len(body["days"]), 7)
        self.assertEqual(body["start"], "2023-12-31")

    def test_month_view(self) -> None:
        self.client.put("/overrides/2024-01-02", json={"schedule_type_id": self.day_a["id"]})
        body = self.client.get("/views/month/2024-01").json()
        self.assertEqual(len(body["cells"]), 35)
        self.assertIsNone(body["cells"][0])
        jan2 = body["cells"][2]
        self.assertEqual(jan2["date"], "2024-01-02")
        self.assertTrue(jan2["has_override"])
        self.assertEqual(jan2["schedule_type"]["name"], "Day A")

    def test_invalid_dates_are_400(self) -> None:
        self.assertEqual(self.client.get("/views/day/2024-13-01").status_code, 400)
        self.assertEqual(self.client.get("/views/week/not-a-date").status_code, 400)
        self.assertEqual(self.client.get("/views/month/2024-00").status_code, 400)
        self.assertEqual(self.client.get("/views/day/20240102").status_code, 400)

    def test_dates_beyond_calendar_limits_are_400(self) -> None:
        for path in ["/views/month/0000-01", "/views/month/10000-01"]:
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path).status_code, 400)

        resp = self.client.get("/views/week/0001-01-01", params={"show_weekends": "true"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get("/views/week/0001-01-01").status_code, 200)
        self.assertEqual(self.client.get("/views/month/9999-12").status_code, 200)


if __name__ == "__main__":
    unittest.main(verbosity=2)
