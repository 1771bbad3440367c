"""
Tests API des seances d'entrainement : exercices embarques, remplacement, suppression en cascade.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from app.main import app
from app.domain.entities import Workout, WorkoutExercise


WORKOUT = {
    "date": "2025-10-16",
    "workout_type": "strength",
    "title": "Haut du corps",
    "duration_minutes": 45,
    "calories_burned": 300,
    "exercises": [
        {"exercise_name": "Pompes", "sets": 3, "reps": 12},
        {"exercise_name": "Tractions", "sets": 3, "reps": 8},
    ],
}


@pytest.fixture
def workout(client):
    resp = client.post("/api/workouts", json=WORKOUT)
    assert resp.status_code == 200
    return resp.json()


class TestWorkouts:

    def test_create_embeds_exercises(self, workout):
        assert workout["id"]
        assert workout["title"] == "Haut du corps"
        assert {e["exercise_name"] for e in workout["exercises"]} == {"Pompes", "Tractions"}
        assert all(e["workout_id"] == workout["id"] for e in workout["exercises"])

    def test_create_without_exercises(self, client):
        body = client.post("/api/workouts", json={**WORKOUT, "exercises": []}).json()
        assert body["exercises"] == []

    def test_list_by_date_embeds_exercises(self, client, workout):
        client.post("/api/workouts", json={**WORKOUT, "date": "2025-10-17", "exercises": []})

        rows = client.get("/api/workouts", params={"date": "2025-10-16"}).json()
        assert len(rows) == 1
        assert len(rows[0]["exercises"]) == 2
        assert len(client.get("/api/workouts").json()) == 2

    def test_get_unknown(self, client):
        resp = client.get("/api/workouts/00000000-0000-0000-0000-000000000000")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Workout not found"}

    def test_partial_update_keeps_exercises(self, client, workout):
        body = client.put(f"/api/workouts/{workout['id']}", json={"title": "Dos"}).json()
        assert body["title"] == "Dos"
        assert body["duration_minutes"] == 45
        assert len(body["exercises"]) == 2

    def test_update_replaces_exercise_list(self, client, session, workout):
        body = client.put(f"/api/workouts/{workout['id']}", json={
            "exercises": [{"exercise_name": "Gainage", "duration_seconds": 60}],
        }).json()
        assert [e["exercise_name"] for e in body["exercises"]] == ["Gainage"]
        assert len(session.exec(select(WorkoutExercise)).all()) == 1

    def test_delete_removes_exercises(self, client, session, workout):
        assert client.delete(f"/api/workouts/{workout['id']}").status_code == 200
        assert session.exec(select(WorkoutExercise)).all() == []
        assert client.delete(f"/api/workouts/{workout['id']}").status_code == 404

    def test_null_for_required_field_is_bad_request(self, client, workout):
        resp = client.put(f"/api/workouts/{workout['id']}", json={"title": None})
        assert resp.status_code == 400
        assert "title" in resp.json()["error"]
        assert client.get(f"/api/workouts/{workout['id']}").json()["title"] == "Haut du corps"

    def test_null_for_optional_field_clears_it(self, client, workout):
        body = client.put(f"/api/workouts/{workout['id']}", json={"calories_burned": None}).json()
        assert body["calories_burned"] is None


def _has_new_exercise(flush_session):
    return any(isinstance(obj, WorkoutExercise) for obj in flush_session.new)


class TestWorkoutAtomicity:

    def test_failed_create_leaves_no_rows(self, client, session, failing_flush):
        failing_flush(_has_new_exercise)

        resp = TestClient(app, raise_server_exceptions=False).post("/api/workouts", json=WORKOUT)

        assert resp.status_code == 500
        assert session.exec(select(Workout)).all() == []
        assert session.exec(select(WorkoutExercise)).all() == []

    def test_failed_replacement_keeps_previous_state(self, client, session, workout, failing_flush):
        failing_flush(_has_new_exercise)

        resp = TestClient(app, raise_server_exceptions=False).put(f"/api/workouts/{workout['id']}", json={
            "title": "Jambes",
            "exercises": [{"exercise_name": "Squats", "sets": 4, "reps": 10}],
        })

        assert resp.status_code == 500
        names = {e.exercise_name for e in session.exec(select(WorkoutExercise)).all()}
        assert names == {"Pompes", "Tractions"}
        assert session.exec(select(Workout)).one().title == "Haut du corps"

    def test_failed_delete_keeps_exercises(self, client, session, workout, failing_flush):
        # Les exercices sont supprimes et flushes, puis la seance echoue
        failing_flush(lambda s: any(isinstance(obj, Workout) for obj in s.deleted))

        resp = TestClient(app, raise_server_exceptions=False).delete(f"/api/workouts/{workout['id']}")

        assert resp.status_code == 500
        assert len(session.exec(select(Workout)).all()) == 1
        assert len(session.exec(select(WorkoutExercise)).all()) == 2
