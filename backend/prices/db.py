from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from prices.settings import get_settings


def _default_sqlite_url() -> str:
    # fallback dev: backend/data/prices.db
    settings = get_settings()
    db_path = settings.data_dir / "prices.db"
    return f"sqlite:///{db_path.as_posix()}"


def get_database_url() -> str:
    return get_settings().database_url or _default_sqlite_url()


@lru_cache
def get_engine() -> Engine:
    url = get_database_url()

    # sqlite needs check_same_thread for FastAPI sync access
    connect_args = {}
    if url.startswith("sqlite:///"):
        connect_args = {"check_same_thread": False}

    return create_engine(url, future=True, connect_args=connect_args)


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True)


def new_session() -> Session:
    return get_session_factory()()


def init_db() -> None:
    # import here to avoid circular imports
    from prices.repositories.sql_price_repository import PriceRow  # noqa: F401
    from prices.db_base import Base

    Base.metadata.create_all(get_engine())
