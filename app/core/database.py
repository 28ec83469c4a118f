"""Engine, session factory and the per-request session dependency."""

from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import settings


def _connect_args(database_url: str) -> dict:
    """Driver options for the configured backend."""
    if database_url.startswith("sqlite"):
        # Sessions are used from the request threadpool
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Declarative base for the water metering tables."""


def get_db() -> Iterator[Session]:
    """Yield one session per request and close it on every exit path."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
