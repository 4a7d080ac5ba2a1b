from fastapi.testclient import TestClient

from focushub.data_layer.models import Task, Habit
from focushub.data_layer.repos import TaskRepository, HabitRepository
from focushub.utils.datetime_utils import today_key


class TestAppSurface:
    def test_root_and_health(self, client, store):
        assert client.get("/").json()["name"] == "FocusHub"
        health = client.get("/health").json()
        assert health["status"] == "ok"
        assert health["collections"] == store.stats()

    def test_unknown_route_uses_message_body(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_internal_model_errors_are_server_errors(self, app):
        @app.get("/broken")
        def broken():
            return Task(user_id="someone")

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/broken")
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


class TestTaskRoutes:
    def test_crud_round_trip(self, client, api, user_id):
        response = client.post(f"{api}/tasks", json={
            "title": "Write report", "priority": "high", "estimatedTime": 45})
        assert response.status_code == 200
        task = response.json()
        assert task["title"] == "Write report"
        assert task["priority"] == "high"
        assert task["status"] == "pending"
        assert task["estimatedTime"] == 45
        assert task["userId"] == user_id
        assert task["id"]
        assert task["createdAt"]
        assert task["completedAt"] is None

        listed = client.get(f"{api}/tasks").json()
        assert [t["id"] for t in listed] == [task["id"]]

        done = client.put(f"{api}/tasks/{task['id']}", json={"status": "completed"}).json()
        assert done["status"] == "completed"
        assert done["completedAt"] is not None
        assert done["title"] == "Write report"

        deleted = client.delete(f"{api}/tasks/{task['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Task deleted successfully"}
        assert client.get(f"{api}/tasks").json() == []

    def test_created_completed_task_is_stamped(self, client, api):
        task = client.post(f"{api}/tasks", json={"title": "Done", "status": "completed"}).json()
        assert task["completedAt"] is not None

    def test_missing_task(self, client, api):
        for response in (
            client.get(f"{api}/tasks/missing"),
            client.put(f"{api}/tasks/missing", json={"title": "x"}),
            client.delete(f"{api}/tasks/missing"),
        ):
            assert response.status_code == 404
            assert response.json() == {"message": "Task not found"}

    def test_invalid_payloads(self, client, api):
        for payload in ({}, {"title": ""}, {"title": "x", "priority": "urgent"}):
            response = client.post(f"{api}/tasks", json=payload)
            assert response.status_code == 400
            assert response.json() == {"message": "Invalid request data"}

    def test_null_for_required_field_is_rejected(self, client, api):
        task = client.post(f"{api}/tasks", json={"title": "Keep"}).json()
        response = client.put(f"{api}/tasks/{task['id']}", json={"title": None})
        assert response.status_code == 400
        assert client.get(f"{api}/tasks/{task['id']}").json()["title"] == "Keep"

    def test_other_users_tasks_are_hidden(self, client, api, store):
        other_id = TaskRepository(store).create_task(Task(user_id="someone-else", title="private"))
        assert client.get(f"{api}/tasks").json() == []
        assert client.get(f"{api}/tasks/{other_id}").status_code == 404
        assert client.delete(f"{api}/tasks/{other_id}").status_code == 404
        assert TaskRepository(store).find_by_id(other_id) is not None


class TestEventAndNoteRoutes:
    def test_event_defaults_and_update(self, client, api):
        event = client.post(f"{api}/events", json={
            "title": "Standup",
            "startTime": "2024-03-10T09:00:00Z",
            "endTime": "2024-03-10T09:15:00Z",
        }).json()
        assert event["reminderMinutes"] == 15
        updated = client.put(f"{api}/events/{event['id']}", json={"location": "Room 2"}).json()
        assert updated["location"] == "Room 2"
        assert client.delete(f"{api}/events/{event['id']}").json() == {
            "message": "Event deleted successfully"}

    def test_event_requires_times(self, client, api):
        response = client.post(f"{api}/events", json={"title": "No times"})
        assert response.status_code == 400

    def test_note_timestamps(self, client, api):
        note = client.post(f"{api}/notes", json={"title": "Ideas", "tags": ["work"]}).json()
        assert note["updatedAt"] == note["createdAt"]
        assert note["attachments"] == []
        updated = client.put(f"{api}/notes/{note['id']}", json={"content": "More"}).json()
        assert updated["content"] == "More"
        assert updated["tags"] == ["work"]
        assert updated["updatedAt"] >= note["updatedAt"]
        assert client.get(f"{api}/notes/missing").json() == {"message": "Note not found"}


class TestPomodoroRoutes:
    def test_session_lifecycle(self, client, api):
        session = client.post(f"{api}/pomodoro/sessions", json={
            "type": "focus", "duration": 25}).json()
        assert session["completed"] is False
        assert session["endTime"] is None

        finished = client.put(f"{api}/pomodoro/sessions/{session['id']}",
                              json={"completed": True}).json()
        assert finished["completed"] is True
        assert finished["endTime"] is not None

        today = client.get(f"{api}/pomodoro/sessions", params={"date": today_key()}).json()
        assert [s["id"] for s in today] == [session["id"]]
        assert client.get(f"{api}/pomodoro/sessions", params={"date": "2000-01-01"}).json() == []

    def test_invalid_session(self, client, api):
        assert client.post(f"{api}/pomodoro/sessions",
                           json={"type": "nap", "duration": 25}).status_code == 400
        assert client.post(f"{api}/pomodoro/sessions",
                           json={"type": "focus", "duration": 0}).status_code == 400
        response = client.put(f"{api}/pomodoro/sessions/missing", json={"completed": True})
        assert response.json() == {"message": "Session not found"}

    def test_bad_date_filter(self, client, api):
        response = client.get(f"{api}/pomodoro/sessions", params={"date": "10/03/2024"})
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid date format"}


class TestWaterRoutes:
    def test_intake_defaults_to_today(self, client, api):
        entry = client.post(f"{api}/water", json={"amount": 250}).json()
        assert entry["date"] == today_key()
        assert [e["amount"] for e in client.get(f"{api}/water").json()] == [250]

    def test_intake_for_given_day(self, client, api):
        client.post(f"{api}/water", json={"amount": 300, "date": "2024-03-10"})
        assert client.get(f"{api}/water").json() == []
        day = client.get(f"{api}/water", params={"date": "2024-03-10"}).json()
        assert [e["amount"] for e in day] == [300]

    def test_invalid_amount(self, client, api):
        assert client.post(f"{api}/water", json={"amount": 0}).status_code == 400
        assert client.post(f"{api}/water", json={"amount": 100, "date": "2024-3-1"}).status_code == 400


class TestHabitRoutes:
    def test_habit_crud(self, client, api):
        habit = client.post(f"{api}/habits", json={"name": "Read", "targetCount": 2}).json()
        assert habit["color"] == "#4CAF50"
        assert habit["frequency"] == "daily"
        assert habit["isActive"] is True
        updated = client.put(f"{api}/habits/{habit['id']}", json={"isActive": False}).json()
        assert updated["isActive"] is False
        assert client.get(f"{api}/habits/{habit['id']}").json()["targetCount"] == 2
        assert client.delete(f"{api}/habits/{habit['id']}").json() == {
            "message": "Habit deleted successfully"}
        assert client.get(f"{api}/habits").json() == []

    def test_invalid_color(self, client, api):
        response = client.post(f"{api}/habits", json={"name": "Run", "color": "green"})
        assert response.status_code == 400

    def test_entries_upsert_per_day(self, client, api):
        habit = client.post(f"{api}/habits", json={"name": "Read"}).json()
        first = client.post(f"{api}/habits/entries", json={
            "habitId": habit["id"], "count": 1}).json()
        assert first["date"] == today_key()
        assert first["completed"] is False

        second = client.post(f"{api}/habits/entries", json={
            "habitId": habit["id"], "completed": True}).json()
        assert second["id"] == first["id"]
        assert second["completed"] is True
        assert second["count"] == 1

        entries = client.get(f"{api}/habits/entries").json()
        assert [e["id"] for e in entries] == [first["id"]]

    def test_repeat_entry_without_fields_keeps_check_in(self, client, api):
        habit = client.post(f"{api}/habits", json={"name": "Read"}).json()
        first = client.post(f"{api}/habits/entries", json={
            "habitId": habit["id"], "completed": True, "count": 3}).json()
        second = client.post(f"{api}/habits/entries", json={"habitId": habit["id"]})
        assert second.status_code == 200
        assert second.json()["id"] == first["id"]
        assert second.json()["completed"] is True
        assert second.json()["count"] == 3
        dashboard = client.get(f"{api}/analytics/dashboard").json()
        assert dashboard["scores"]["habits"] == 100

    def test_list_active_habits(self, client, api):
        client.post(f"{api}/habits", json={"name": "Read"})
        client.post(f"{api}/habits", json={"name": "Run", "isActive": False})
        assert len(client.get(f"{api}/habits").json()) == 2
        active = client.get(f"{api}/habits", params={"active": "true"}).json()
        assert [h["name"] for h in active] == ["Read"]

    def test_entry_update(self, client, api):
        habit = client.post(f"{api}/habits", json={"name": "Read"}).json()
        entry = client.post(f"{api}/habits/entries", json={
            "habitId": habit["id"], "date": "2024-03-10"}).json()
        updated = client.put(f"{api}/habits/entries/{entry['id']}", json={"count": 3}).json()
        assert updated["count"] == 3
        assert client.get(f"{api}/habits/entries").json() == []
        response = client.put(f"{api}/habits/entries/missing", json={"count": 1})
        assert response.json() == {"message": "Habit entry not found"}

    def test_entry_for_unknown_habit(self, client, api, store):
        other = HabitRepository(store).create_habit(Habit(user_id="someone-else", name="x"))
        for habit_id in ("missing", other):
            response = client.post(f"{api}/habits/entries", json={"habitId": habit_id})
            assert response.status_code == 404
            assert response.json() == {"message": "Habit not found"}


class TestDistractionSiteRoutes:
    def test_site_crud(self, client, api):
        site = client.post(f"{api}/distraction-sites", json={
            "url": "news.example.com", "name": "News"}).json()
        assert site["isBlocked"] is True
        updated = client.put(f"{api}/distraction-sites/{site['id']}",
                             json={"isBlocked": False}).json()
        assert updated["isBlocked"] is False
        assert client.delete(f"{api}/distraction-sites/{site['id']}").json() == {
            "message": "Site deleted successfully"}
        response = client.delete(f"{api}/distraction-sites/{site['id']}")
        assert response.status_code == 404
        assert response.json() == {"message": "Site not found"}

    def test_list_blocked_sites(self, client, api):
        client.post(f"{api}/distraction-sites", json={"url": "a.example", "name": "A"})
        client.post(f"{api}/distraction-sites", json={
            "url": "b.example", "name": "B", "isBlocked": False})
        assert len(client.get(f"{api}/distraction-sites").json()) == 2
        blocked = client.get(f"{api}/distraction-sites", params={"blocked": "true"}).json()
        assert [s["name"] for s in blocked] == ["A"]


class TestSettingsRoutes:
    def test_defaults_then_update(self, client, api):
        defaults = client.get(f"{api}/settings").json()
        assert defaults["pomodoroFocusTime"] == 25
        assert defaults["waterDailyGoal"] == 2500
        assert defaults["theme"] == "light"

        updated = client.put(f"{api}/settings", json={"waterDailyGoal": 3000, "theme": "dark"}).json()
        assert updated["id"] == defaults["id"]
        assert updated["waterDailyGoal"] == 3000
        assert updated["theme"] == "dark"
        assert updated["pomodoroShortBreak"] == 5

    def test_rejects_empty_and_invalid_updates(self, client, api):
        assert client.put(f"{api}/settings", json={}).status_code == 400
        assert client.put(f"{api}/settings", json={"theme": "neon"}).status_code == 400
        assert client.put(f"{api}/settings", json={"pomodoroFocusTime": 0}).status_code == 400


class TestAnalyticsRoutes:
    def test_empty_dashboard(self, client, api):
        dashboard = client.get(f"{api}/analytics/dashboard").json()
        assert dashboard == {
            "tasksCompleted": "0/0",
            "pomodorosToday": 0,
            "waterIntake": "0.0L / 2.5L",
            "dailyScore": "0/100",
            "scores": {
                "tasks": 0, "pomodoro": 0, "water": 0,
                "habits": 0, "blocker": 95, "overall": 0,
            },
        }

    def test_dashboard_aggregates_today(self, client, api):
        for title, status in (("a", "completed"), ("b", "pending")):
            client.post(f"{api}/tasks", json={"title": title, "status": status})
        session = client.post(f"{api}/pomodoro/sessions", json={"type": "focus", "duration": 25}).json()
        client.put(f"{api}/pomodoro/sessions/{session['id']}", json={"completed": True})
        client.post(f"{api}/water", json={"amount": 1500})
        habit = client.post(f"{api}/habits", json={"name": "Read"}).json()
        client.post(f"{api}/habits/entries", json={"habitId": habit["id"], "completed": True})

        dashboard = client.get(f"{api}/analytics/dashboard").json()
        assert dashboard["tasksCompleted"] == "1/2"
        assert dashboard["pomodorosToday"] == 1
        assert dashboard["waterIntake"] == "1.5L / 2.5L"
        scores = dashboard["scores"]
        assert (scores["tasks"], scores["pomodoro"], scores["water"], scores["habits"]) == \
            (50, 12, 60, 100)
        # (50 + 12 + 60 + 100) / 4 = 55.5
        assert scores["overall"] == 56
        assert dashboard["dailyScore"] == "56/100"

    def test_weekly(self, client, api):
        weekly = client.get(f"{api}/analytics/weekly").json()
        assert weekly["labels"] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert weekly["productivity"] == [75, 82, 78, 85, 90, 88, 87]

    def test_daily_scores(self, client, api):
        client.post(f"{api}/tasks", json={"title": "a", "status": "completed"})
        client.post(f"{api}/water", json={"amount": 2500})
        report = client.get(f"{api}/analytics/scores", params={"blockingMinutes": 1000}).json()
        assert report["date"] == today_key()
        assert report["activity"]["completedTasks"] == 1
        assert report["activity"]["waterGoal"] == 2500
        assert report["activity"]["distractionBlockingMinutes"] == 1000
        # 100*.3 + 0 + 100*.15 + 0 + 100*.1 = 55
        assert report["scores"] == {
            "tasks": 100, "pomodoro": 0, "water": 100,
            "habits": 0, "focus": 100, "overall": 55,
        }
        assert report["tier"] == "below-average"
        assert report["label"] == "Below Average"
        assert report["color"] == "text-orange-600 dark:text-orange-400"
        assert len(report["insights"]) == 3

    def test_daily_scores_default_blocking_minutes(self, client, api):
        report = client.get(f"{api}/analytics/scores", params={"date": "2024-03-10"}).json()
        assert report["date"] == "2024-03-10"
        assert report["activity"]["distractionBlockingMinutes"] == 480
        assert report["scores"]["focus"] == 48

    def test_daily_scores_rejects_negative_minutes(self, client, api):
        response = client.get(f"{api}/analytics/scores", params={"blockingMinutes": -5})
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request data"}
