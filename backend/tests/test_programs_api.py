"""
Tests des programmes bien-etre, des inscriptions et de la suppression en cascade.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from app.main import app
from app.domain.entities import ProgramEnrollment, ProgramAnalytics, SavedRenewalItem, WellnessProgram


PROGRAM = {
    "program_type": "stress_relief",
    "title": "7 jours pour souffler",
    "description": "Une pratique courte chaque jour",
    "duration_days": 3,
    "daily_activities": [
        {"day": 1, "title": "Respirer", "activity": "Cinq minutes de coherence cardiaque"},
        {"day": 2, "title": "Marcher", "activity": "Dix minutes dehors"},
    ],
}


@pytest.fixture
def program(client):
    resp = client.post("/api/wellness/programs", json=PROGRAM)
    assert resp.status_code == 200
    return resp.json()


@pytest.fixture
def enrollment(client, program, auth_headers):
    resp = client.post("/api/wellness/enrollments", json={"program_id": program["id"]}, headers=auth_headers)
    assert resp.status_code == 200
    return resp.json()


class TestPrograms:

    def test_create_and_get_details(self, client, program):
        assert program["is_premium"] is False
        assert program["daily_activities"][0]["title"] == "Respirer"

        detail = client.get(f"/api/wellness/programs/{program['id']}").json()
        assert detail["daily_activities"] == PROGRAM["daily_activities"]

    def test_list_omits_daily_activities(self, client, program):
        rows = client.get("/api/wellness/programs").json()
        assert [r["id"] for r in rows] == [program["id"]]
        assert "daily_activities" not in rows[0]

    def test_partial_update(self, client, program):
        body = client.put(f"/api/wellness/programs/{program['id']}", json={"is_premium": True}).json()
        assert body["is_premium"] is True
        assert body["title"] == PROGRAM["title"]

    def test_null_title_is_bad_request(self, client, program):
        resp = client.put(f"/api/wellness/programs/{program['id']}", json={"title": None})
        assert resp.status_code == 400
        assert "title" in resp.json()["error"]

    def test_zero_duration_rejected(self, client):
        assert client.post("/api/wellness/programs", json={**PROGRAM, "duration_days": 0}).status_code == 400

    def test_unknown_program(self, client):
        resp = client.get("/api/wellness/programs/not-a-uuid")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Program not found"}


class TestEnrollments:

    def test_requires_authentication(self, client, program):
        assert client.post("/api/wellness/enrollments", json={"program_id": program["id"]}).status_code == 401

    def test_enroll_starts_at_day_one(self, enrollment, program):
        assert enrollment["current_day"] == 1
        assert enrollment["completed_days"] == []
        assert enrollment["is_completed"] is False
        assert enrollment["program"]["title"] == PROGRAM["title"]

    def test_enroll_twice(self, client, enrollment, program, auth_headers):
        resp = client.post("/api/wellness/enrollments", json={"program_id": program["id"]}, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Already enrolled in this program"}

    def test_enroll_unknown_program(self, client, auth_headers):
        resp = client.post(
            "/api/wellness/enrollments",
            json={"program_id": "00000000-0000-0000-0000-000000000000"},
            headers=auth_headers,
        )
        assert resp.status_code == 404

    def test_list_only_own_enrollments(self, client, enrollment, program, auth_headers, other_auth_headers):
        client.post("/api/wellness/enrollments", json={"program_id": program["id"]}, headers=other_auth_headers)

        rows = client.get("/api/wellness/enrollments", headers=auth_headers).json()
        assert [r["id"] for r in rows] == [enrollment["id"]]
        assert rows[0]["program"]["duration_days"] == 3

    def test_progress_until_completed(self, client, enrollment, auth_headers):
        url = f"/api/wellness/enrollments/{enrollment['id']}/progress"

        body = client.put(url, json={"day": 2}, headers=auth_headers).json()
        assert body["completed_days"] == [2]
        assert body["current_day"] == 3

        client.put(url, json={"day": 1}, headers=auth_headers)
        client.put(url, json={"day": 1}, headers=auth_headers)
        body = client.put(url, json={"day": 3}, headers=auth_headers).json()

        assert body["completed_days"] == [1, 2, 3]
        assert body["current_day"] == 4
        assert body["is_completed"] is True
        assert body["completed_at"]

    def test_day_outside_program(self, client, enrollment, auth_headers):
        url = f"/api/wellness/enrollments/{enrollment['id']}/progress"
        assert client.put(url, json={"day": 4}, headers=auth_headers).status_code == 400
        assert client.put(url, json={"day": 0}, headers=auth_headers).status_code == 400

    def test_other_user_cannot_touch_enrollment(self, client, enrollment, other_auth_headers):
        progress = client.put(
            f"/api/wellness/enrollments/{enrollment['id']}/progress", json={"day": 1}, headers=other_auth_headers
        )
        assert progress.status_code == 403
        assert progress.json() == {"error": "Unauthorized"}
        assert client.delete(
            f"/api/wellness/enrollments/{enrollment['id']}", headers=other_auth_headers
        ).status_code == 403

    def test_unenroll(self, client, enrollment, auth_headers):
        resp = client.delete(f"/api/wellness/enrollments/{enrollment['id']}", headers=auth_headers)
        assert resp.json() == {"success": True, "id": enrollment["id"]}
        assert client.get("/api/wellness/enrollments", headers=auth_headers).json() == []


class TestProgramDeletion:

    def _populate(self, client, program, auth_headers):
        client.post("/api/wellness/enrollments", json={"program_id": program["id"]}, headers=auth_headers)
        client.post("/api/renewal/saved-items", json={"item_type": "program", "item_id": program["id"]},
                    headers=auth_headers)
        client.post("/api/insights/analytics/record", json={
            "program_id": program["id"], "date": "2025-10-16", "active_users": 12, "completions": 3,
        })

    def test_delete_cascades(self, client, session, program, auth_headers):
        self._populate(client, program, auth_headers)

        resp = client.delete(f"/api/wellness/programs/{program['id']}")

        assert resp.json() == {"success": True, "id": program["id"]}
        assert session.exec(select(ProgramEnrollment)).all() == []
        assert session.exec(select(ProgramAnalytics)).all() == []
        assert session.exec(select(SavedRenewalItem)).all() == []
        assert client.delete(f"/api/wellness/programs/{program['id']}").status_code == 404

    def test_failed_delete_keeps_children(self, client, session, program, auth_headers, failing_flush):
        self._populate(client, program, auth_headers)
        failing_flush(lambda s: any(isinstance(obj, WellnessProgram) for obj in s.deleted))

        resp = TestClient(app, raise_server_exceptions=False).delete(f"/api/wellness/programs/{program['id']}")

        assert resp.status_code == 500
        assert len(session.exec(select(WellnessProgram)).all()) == 1
        assert len(session.exec(select(ProgramEnrollment)).all()) == 1
        assert len(session.exec(select(ProgramAnalytics)).all()) == 1
        assert len(session.exec(select(SavedRenewalItem)).all()) == 1
