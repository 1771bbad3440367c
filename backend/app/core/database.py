"""
Configuration de la base de données avec SQLModel
"""
from sqlmodel import create_engine, SQLModel, Session
from app.core.settings import get_settings

settings = get_settings()

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Créer l'engine de base de données
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    connect_args=_connect_args,
)


def create_db_and_tables():
    """Créer toutes les tables de la base de données"""
    import app.domain.entities  # noqa: F401  (enregistre les tables)
    SQLModel.metadata.create_all(engine)


def get_session():
    """Générateur de session de base de données pour l'injection de dependance"""
    with Session(engine) as session:
        yield session
