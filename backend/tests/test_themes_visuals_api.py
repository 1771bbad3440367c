"""
Tests des themes, preferences, visuels de rythme et visuel de renouveau.
"""
from datetime import date, datetime
from uuid import UUID

import pytest

from app.domain.entities import RenewalVisualCreate, VisualTheme, VisualThemeCreate, UserPreferencesUpdate
from app.domain.services.theme_service import theme_service
from app.domain.services.visual_service import visual_service

COLORS = {
    "background_color": "#FFF8F0",
    "card_color": "#FFFFFF",
    "text_color": "#2D2A26",
    "text_secondary_color": "#6B6560",
    "primary_color": "#C67B5C",
    "secondary_color": "#8FA68E",
    "accent_color": "#E8B86D",
}


def _theme(client, name, **extra):
    return client.post("/api/themes", json={"theme_name": name, **COLORS, **extra}).json()


class TestThemes:

    def test_create_groups_colors(self, client):
        theme = _theme(client, "Warm Earth")
        assert theme["theme_name"] == "Warm Earth"
        assert theme["colors"] == COLORS
        assert theme["is_active"] is True
        assert set(theme) == {"id", "theme_name", "colors", "is_active"}

    def test_partial_update(self, client):
        theme = _theme(client, "Warm Earth")
        body = client.put(f"/api/themes/{theme['id']}", json={"accent_color": "#000000"}).json()
        assert body["colors"]["accent_color"] == "#000000"
        assert body["colors"]["card_color"] == "#FFFFFF"

    def test_null_color_is_bad_request(self, client):
        theme = _theme(client, "Warm Earth")
        resp = client.put(f"/api/themes/{theme['id']}", json={"card_color": None})
        assert resp.status_code == 400
        assert "card_color" in resp.json()["error"]

    def test_get_unknown_theme(self, client):
        resp = client.get("/api/themes/00000000-0000-0000-0000-000000000000")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Theme not found"}


class TestPreferences:

    def test_defaults_without_row(self, client):
        assert client.get("/api/preferences").json() == {
            "user_id": "default_user", "selected_theme_id": None, "auto_theme_by_time": False,
        }

    def test_upsert_and_selected_theme(self, client):
        _theme(client, "Neutral Calm")
        chosen = _theme(client, "Deep Grounding")

        client.put("/api/preferences", json={"selected_theme_id": chosen["id"]})
        client.put("/api/preferences", json={"auto_theme_by_time": False})

        assert client.get("/api/preferences").json()["selected_theme_id"] == chosen["id"]
        assert client.get("/api/preferences/current-theme").json()["id"] == chosen["id"]

    def test_falls_back_to_first_active_theme(self, client):
        first = _theme(client, "Neutral Calm")
        _theme(client, "Warm Earth")
        assert client.get("/api/preferences/current-theme").json()["id"] == first["id"]

    def test_unknown_selected_theme_is_bad_request(self, client):
        resp = client.put("/api/preferences", json={"selected_theme_id": "00000000-0000-0000-0000-000000000000"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Selected theme does not exist"}
        assert client.get("/api/preferences").json()["selected_theme_id"] is None

    def test_clearing_selected_theme(self, client):
        chosen = _theme(client, "Deep Grounding")
        client.put("/api/preferences", json={"selected_theme_id": chosen["id"]})
        body = client.put("/api/preferences", json={"selected_theme_id": None}).json()
        assert body["selected_theme_id"] is None

    def test_deleted_selected_theme_falls_back(self, client, session):
        first = _theme(client, "Neutral Calm")
        chosen = _theme(client, "Deep Grounding")
        client.put("/api/preferences", json={"selected_theme_id": chosen["id"]})

        session.delete(session.get(VisualTheme, UUID(chosen["id"])))
        session.commit()

        assert client.get("/api/preferences/current-theme").json()["id"] == first["id"]

    def test_no_theme_is_not_found(self, client):
        assert client.get("/api/preferences/current-theme").status_code == 404

    def test_time_of_day_theme(self, session):
        theme_service.create(session, VisualThemeCreate(theme_name="Neutral Calm", **COLORS))
        dawn = theme_service.create(session, VisualThemeCreate(theme_name="Energizing Dawn", **COLORS))
        theme_service.update_preferences(session, UserPreferencesUpdate(auto_theme_by_time=True))

        current = theme_service.current_theme(session, now=datetime(2025, 10, 16, 7, 30))
        assert current.id == dawn.id


class TestRhythmVisuals:

    def test_current_month_ordered(self, client):
        month = date.today().month
        other_month = month % 12 + 1
        for name, category, order, active in (
            ("b", "morning", 2, month),
            ("a", "morning", 1, month),
            ("c", "evening", 0, month),
            ("d", "morning", 0, other_month),
        ):
            client.post("/api/visuals/rhythms", json={
                "rhythm_category": category, "rhythm_name": name, "image_url": f"/uploads/{name}.png",
                "month_active": active, "display_order": order,
            })

        assert [v["rhythm_name"] for v in client.get("/api/visuals/rhythms").json()] == ["c", "a", "b"]
        morning = client.get("/api/visuals/rhythms/morning").json()
        assert [v["rhythm_name"] for v in morning] == ["a", "b"]
        assert "month_active" not in morning[0]

    def test_invalid_month(self, client):
        resp = client.post("/api/visuals/rhythms", json={
            "rhythm_category": "morning", "rhythm_name": "x", "image_url": "/x.png", "month_active": 13,
        })
        assert resp.status_code == 400


class TestRenewalVisual:
    # Jeudi 16 octobre 2025 : automne, mois 10, jour 4
    today = date(2025, 10, 16)

    def _add(self, session, **fields):
        return visual_service.create_renewal(session, RenewalVisualCreate(image_url="/x.png", **fields))

    def test_seasonal_wins_over_monthly_and_daily(self, session):
        self._add(session, visual_type="daily", day_of_week=4)
        self._add(session, visual_type="monthly", month=10)
        seasonal = self._add(session, visual_type="seasonal", season="fall")

        assert visual_service.current_renewal(session, self.today).id == seasonal.id

    def test_monthly_before_daily(self, session):
        self._add(session, visual_type="seasonal", season="spring")
        self._add(session, visual_type="daily", day_of_week=4)
        monthly = self._add(session, visual_type="monthly", month=10)

        assert visual_service.current_renewal(session, self.today).id == monthly.id

    def test_daily_uses_sunday_zero(self, session):
        self._add(session, visual_type="daily", day_of_week=3)
        thursday = self._add(session, visual_type="daily", day_of_week=4)

        assert visual_service.current_renewal(session, self.today).id == thursday.id

    def test_fallback_to_any_visual(self, session):
        only = self._add(session, visual_type="monthly", month=3)
        assert visual_service.current_renewal(session, self.today).id == only.id

    def test_empty_collection_is_not_found(self, client):
        resp = client.get("/api/renewal/visuals/current")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Renewal visual not found"}

    def test_admin_management(self, client):
        created = client.post("/api/renewal/visuals", json={
            "visual_type": "seasonal", "season": "winter", "image_url": "/w.png", "description": "Neige",
        }).json()
        assert created["season"] == "winter"
        assert client.get("/api/renewal/visuals/current").json()["id"] == created["id"]
        assert len(client.get("/api/renewal/visuals").json()) == 1
        assert client.delete(f"/api/renewal/visuals/{created['id']}").status_code == 200
        assert client.delete(f"/api/renewal/visuals/{created['id']}").status_code == 404

    @pytest.mark.parametrize("payload", [
        {"visual_type": "hourly", "image_url": "/x.png"},
        {"visual_type": "daily", "day_of_week": 7, "image_url": "/x.png"},
    ])
    def test_invalid_payload(self, client, payload):
        assert client.post("/api/renewal/visuals", json=payload).status_code == 400
