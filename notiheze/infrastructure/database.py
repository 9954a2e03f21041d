"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from notiheze.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

_LEGACY_POSTGRES_SCHEME = "postgres://"


def _normalize_database_url(raw_url: str) -> str:
    """Return a URL SQLAlchemy 2 accepts for the configured database."""

    if raw_url.startswith(_LEGACY_POSTGRES_SCHEME):
        logger.warning(
            "DATABASE_URL uses the deprecated 'postgres://' scheme; using 'postgresql://' instead."
        )
        return "postgresql://" + raw_url[len(_LEGACY_POSTGRES_SCHEME) :]
    return raw_url


def _engine_options(url: str) -> dict[str, object]:
    if url.startswith("sqlite"):
        # Sessions are used from the threadpool FastAPI runs sync endpoints in.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


database_url = _normalize_database_url(settings.database_url)
engine = create_engine(database_url, **_engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from notiheze.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
