"""Database engine and session management.

Uses SQLAlchemy 2.0 with a synchronous driver. Config builders only read with
bound `text()` statements, so no ORM models are mapped here.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from site_config.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> dict:
    if settings.is_sqlite:
        # In-memory SQLite must share one connection across threads
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True}


engine = create_engine(settings.database_url, echo=False, **_engine_options())

session_factory = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
)


def get_db():
    """FastAPI dependency — yields a DB session."""
    with session_factory() as session:
        yield session


def check_db() -> bool:
    """Run a trivial query. Returns True when the store is reachable."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning("Database unavailable: %s", str(e)[:200])
        return False


def close_db():
    """Dispose engine connections on shutdown."""
    engine.dispose()
    logger.info("Database connections closed")
