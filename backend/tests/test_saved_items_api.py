"""
Tests des elements de renouveau sauvegardes et du nettoyage a la suppression d'un visuel.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from app.main import app
from app.domain.entities import RenewalVisual, SavedRenewalItem


URL = "/api/renewal/saved-items"


@pytest.fixture
def saved(client, auth_headers):
    resp = client.post(URL, json={"item_type": "ritual", "item_id": "morning-ritual"}, headers=auth_headers)
    assert resp.status_code == 200
    return resp.json()


class TestSavedItems:

    def test_requires_authentication(self, client):
        assert client.get(URL).status_code == 401

    def test_save_and_list(self, client, saved, auth_headers, other_auth_headers):
        assert saved["item_type"] == "ritual"
        assert saved["is_paused"] is False

        assert [i["id"] for i in client.get(URL, headers=auth_headers).json()] == [saved["id"]]
        assert client.get(URL, headers=other_auth_headers).json() == []

    def test_save_twice(self, client, saved, auth_headers):
        resp = client.post(URL, json={"item_type": "ritual", "item_id": "morning-ritual"}, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Item already saved"}

    def test_same_item_for_two_users(self, client, saved, other_auth_headers):
        resp = client.post(URL, json={"item_type": "ritual", "item_id": "morning-ritual"},
                           headers=other_auth_headers)
        assert resp.status_code == 200

    @pytest.mark.parametrize("payload", [
        {"item_type": "podcast", "item_id": "x"},
        {"item_type": "tool", "item_id": ""},
        {"item_type": "tool"},
    ])
    def test_invalid_payload(self, client, auth_headers, payload):
        assert client.post(URL, json=payload, headers=auth_headers).status_code == 400

    def test_pause_and_resume(self, client, saved, auth_headers):
        url = f"{URL}/{saved['id']}/pause"
        assert client.put(url, json={"is_paused": True}, headers=auth_headers).json()["is_paused"] is True
        assert client.put(url, json={"is_paused": False}, headers=auth_headers).json()["is_paused"] is False

    def test_other_user_is_forbidden(self, client, saved, other_auth_headers):
        resp = client.put(f"{URL}/{saved['id']}/pause", json={"is_paused": True}, headers=other_auth_headers)
        assert resp.status_code == 403
        assert client.delete(f"{URL}/{saved['id']}", headers=other_auth_headers).status_code == 403

    def test_delete(self, client, saved, auth_headers):
        resp = client.delete(f"{URL}/{saved['id']}", headers=auth_headers)
        assert resp.json() == {"success": True, "id": saved["id"]}
        assert client.delete(f"{URL}/{saved['id']}", headers=auth_headers).status_code == 404

    def test_unknown_item(self, client, auth_headers):
        resp = client.delete(f"{URL}/not-a-uuid", headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json() == {"error": "Saved item not found"}


class TestRenewalVisualDeletion:

    @pytest.fixture
    def visual(self, client, auth_headers, other_auth_headers):
        visual = client.post("/api/renewal/visuals", json={
            "visual_type": "monthly", "month": 3, "image_url": "/uploads/mars.png",
        }).json()
        for headers in (auth_headers, other_auth_headers):
            client.post(URL, json={"item_type": "visual", "item_id": visual["id"]}, headers=headers)
        # Sauvegarde d'un autre type, hors de la cascade
        client.post(URL, json={"item_type": "ritual", "item_id": "evening"}, headers=auth_headers)
        return visual

    def test_delete_removes_saved_references(self, client, session, visual):
        assert client.delete(f"/api/renewal/visuals/{visual['id']}").status_code == 200

        remaining = session.exec(select(SavedRenewalItem)).all()
        assert [(i.item_type, i.item_id) for i in remaining] == [("ritual", "evening")]

    def test_failed_delete_keeps_everything(self, client, session, visual, failing_flush):
        failing_flush(lambda s: any(isinstance(obj, RenewalVisual) for obj in s.deleted))

        resp = TestClient(app, raise_server_exceptions=False).delete(f"/api/renewal/visuals/{visual['id']}")

        assert resp.status_code == 500
        assert len(session.exec(select(RenewalVisual)).all()) == 1
        assert len(session.exec(select(SavedRenewalItem)).all()) == 3
