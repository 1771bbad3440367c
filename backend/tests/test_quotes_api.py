"""
Tests de la citation hebdomadaire : une seule ligne par semaine.
"""
import asyncio
from datetime import date

from fastapi.testclient import TestClient
from sqlmodel import select

from app.main import app
from app.domain.entities import WeeklyQuote
from app.domain.services.quote_service import quote_service


class TestCurrentQuote:

    def test_current_is_generated_once_per_week(self, client, session, text_generator):
        text_generator.responses = ["Respire.", "Autre chose."]

        first = client.get("/api/quotes/current").json()
        second = client.get("/api/quotes/current").json()

        assert first == second
        assert first["quote_text"] == "Respire."
        assert len(text_generator.calls) == 1
        assert len(session.exec(select(WeeklyQuote)).all()) == 1

    def test_week_starts_on_monday(self, session, text_generator):
        # Dimanche 19 octobre 2025 -> semaine du lundi 13
        quote = asyncio.run(quote_service.current(session, text_generator, today=date(2025, 10, 19)))
        assert quote.week_start_date == date(2025, 10, 13)

    def test_generation_failure_is_internal_error(self, client, text_generator):
        async def boom(prompt, system=None):
            raise RuntimeError("provider down")

        text_generator.generate = boom
        resp = TestClient(app, raise_server_exceptions=False).get("/api/quotes/current")
        assert resp.status_code == 500
        assert resp.json()["error"] == "Internal server error"


class TestRegenerateQuote:

    def test_regenerate_twice_keeps_one_row(self, client, session, text_generator):
        text_generator.responses = ["Premiere.", "Deuxieme.", "Troisieme."]
        client.get("/api/quotes/current")

        client.post("/api/quotes/regenerate")
        last = client.post("/api/quotes/regenerate").json()

        rows = session.exec(select(WeeklyQuote)).all()
        assert len(rows) == 1
        assert rows[0].quote_text == "Troisieme."
        assert last["quote_text"] == "Troisieme."
        assert client.get("/api/quotes/current").json()["quote_text"] == "Troisieme."

    def test_regenerate_without_existing_quote(self, client, text_generator):
        text_generator.responses = ["Nouvelle."]
        assert client.post("/api/quotes/regenerate").json()["quote_text"] == "Nouvelle."
