"""Row fetcher — parameterized reads against the relational store.

Every query goes through `text()` with `:name` binds. A failing statement is
raised as StoreError; an empty result is not an error.
"""

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from site_config.errors import StoreError

logger = logging.getLogger(__name__)


def _first_line(sql: str) -> str:
    return " ".join(sql.split())[:80]


class RowFetcher:
    """Thin query executor bound to one session."""

    def __init__(self, session: Session):
        self.session = session

    def _run(self, sql: str, params: dict[str, Any] | None):
        try:
            return self.session.execute(text(sql), params or {})
        except SQLAlchemyError as e:
            logger.error("Query failed | sql=%s | %s", _first_line(sql), str(e)[:200])
            raise StoreError(f"Query failed: {e}") from e

    def fetch_all(self, sql: str, params: dict[str, Any] | None = None) -> list[dict]:
        """Return every matching row as a plain dict (possibly empty)."""
        result = self._run(sql, params)
        return [dict(row) for row in result.mappings().all()]

    def fetch_one(self, sql: str, params: dict[str, Any] | None = None) -> dict | None:
        """Return the first matching row, or None when nothing matched."""
        row = self._run(sql, params).mappings().first()
        return dict(row) if row is not None else None

    def scalar(self, sql: str, params: dict[str, Any] | None = None) -> Any:
        return self._run(sql, params).scalar()

    def execute(self, sql: str, params: dict[str, Any] | None = None) -> int:
        """Run a write statement and commit. Returns the affected row count."""
        try:
            result = self.session.execute(text(sql), params or {})
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Statement failed | sql=%s | %s", _first_line(sql), str(e)[:200])
            raise StoreError(f"Statement failed: {e}") from e
        return result.rowcount
