"""
Configuration partagee des tests : base SQLite en memoire, client HTTP et
generateur de texte factice.
"""
import os

# Doit preceder tout import de l'application (Settings est lu a l'import)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("OPENAI_API_KEY", "")

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import app.domain.entities  # noqa: F401
from app.main import app
from app.core.database import get_session
from app.auth.jwt import jwt_manager
from app.domain.services.text_generator import get_text_generator
from app.domain.services.upload_service import UploadService
from app.api.routers.upload_router import get_upload_service


class FakeTextGenerator:
    """Retourne les reponses prevues dans l'ordre et garde les prompts recus."""

    def __init__(self, responses: Optional[List[str]] = None):
        self.responses = list(responses or [])
        self.calls = []

    async def generate(self, prompt: str, system: Optional[str] = None) -> str:
        self.calls.append({"prompt": prompt, "system": system})
        if self.responses:
            return self.responses.pop(0)
        return f"generated #{len(self.calls)}"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def text_generator():
    return FakeTextGenerator()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(session, text_generator, upload_dir):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_text_generator] = lambda: text_generator
    app.dependency_overrides[get_upload_service] = lambda: UploadService(str(upload_dir), 1024)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    token = jwt_manager.create_access_token({"sub": "user-123", "email": "user@example.com"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers():
    token = jwt_manager.create_access_token({"sub": "user-456", "email": "other@example.com"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def failing_flush(session):
    """Fait echouer tout flush dont le contenu satisfait le predicat."""
    listeners = []

    def install(predicate):
        def before_flush(flush_session, flush_context, instances):
            if predicate(flush_session):
                raise RuntimeError("disk full")

        event.listen(session, "before_flush", before_flush)
        listeners.append(before_flush)

    yield install
    for listener in listeners:
        event.remove(session, "before_flush", listener)
