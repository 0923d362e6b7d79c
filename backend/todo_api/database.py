from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from todo_api.config import get_config

_engine = None
_SessionLocal = None
_database_url: str | None = None

Base = declarative_base()


def _is_in_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def configure_engine(database_url: str) -> None:
    """Point the store at database_url, dropping an engine bound to another URL."""
    global _database_url
    if database_url != _database_url:
        reset_engine()
        _database_url = database_url


def get_engine():
    global _engine
    if _engine is None:
        url = _database_url or get_config()["database_url"]
        if _is_in_memory(url):
            # One shared connection, otherwise every checkout sees an empty database
            _engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        elif url.startswith("sqlite"):
            _engine = create_engine(url, connect_args={"check_same_thread": False})
        else:
            _engine = create_engine(url, pool_pre_ping=True)

        # Register the models on Base before creating the schema
        from todo_api import models  # noqa: F401

        Base.metadata.create_all(_engine)
    return _engine


def get_session():
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=get_engine())
    session = _SessionLocal()
    try:
        yield session
    finally:
        session.close()


def reset_engine() -> None:
    """Drop the engine and session factory; the next session starts on an empty store."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
