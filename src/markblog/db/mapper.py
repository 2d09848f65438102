"""Query-to-record mapping over raw SQL.

``RecordMapper.query`` executes a parameterized statement and turns every
result row into a plain ``dict``. Field names are read from the statement
itself: the text between ``SELECT`` and ``FROM`` is split on commas and each
piece becomes a key, verbatim. Nothing is resolved against the table
schema, so ``SELECT count(id) AS n FROM posts`` yields the key
``"count(id) AS n"``.

Callers that want stable names regardless of the statement text can pass
``columns=`` explicitly.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

MappedRecord = dict[str, Any]

_PROJECTION_RE = re.compile(r"SELECT\s+(.*?)\s+FROM", re.IGNORECASE)


class StoreQueryError(RuntimeError):
    """Raised when the store rejects a statement or its bound parameters."""

    def __init__(self, sql: str, params: Sequence[Any]) -> None:
        super().__init__(f"Store rejected query {sql!r} with params {tuple(params)!r}")
        self.sql = sql
        self.params = tuple(params)


def projection_fields(sql: str) -> list[str]:
    """Return the trimmed field names between the first SELECT and FROM.

    An empty list is returned when the statement has no ``SELECT ... FROM``
    section.
    """
    match = _PROJECTION_RE.search(sql)
    if match is None:
        return []
    return [field.strip() for field in match.group(1).split(",")]


def map_row(fields: Sequence[str], row: Sequence[Any]) -> MappedRecord:
    """Pair fields with row values by position, stopping at the shorter one."""
    return dict(zip(fields, row))


class RecordMapper:
    """Run raw SQL on a session and rebuild rows as keyed records."""

    def __init__(self, session: Session, *, count_table: str | None = None) -> None:
        """Bind the mapper to a session.

        Args:
            session: Session whose connection executes the statements.
            count_table: When set, the total row count of this table is
                logged at DEBUG level on every query.
        """
        self.session = session
        self.count_table = count_table

    def query(
        self,
        sql: str,
        params: Sequence[Any] = (),
        *,
        columns: Sequence[str] | None = None,
    ) -> list[MappedRecord]:
        """Execute ``sql`` with positional ``params`` and map every row.

        Args:
            sql: A single ``SELECT ... FROM ...`` statement using ``?`` placeholders.
            params: Values bound positionally to the placeholders.
            columns: Explicit field names; when omitted they are parsed from ``sql``.

        Returns:
            One record per row, in the order the store emitted them.

        Raises:
            StoreQueryError: If the store rejects the statement or the bindings.
        """
        if self.count_table is not None:
            self._log_row_count()

        try:
            result = self.session.connection().exec_driver_sql(sql, tuple(params))
        except SQLAlchemyError as exc:
            raise StoreQueryError(sql, params) from exc

        fields = list(columns) if columns is not None else projection_fields(sql)
        return [map_row(fields, row) for row in result]

    def _log_row_count(self) -> None:
        try:
            count = self.session.connection().exec_driver_sql(
                f"SELECT count(*) FROM {self.count_table}"
            ).scalar()
        except SQLAlchemyError:
            logger.debug("Could not count rows of %s", self.count_table, exc_info=True)
            return
        logger.debug("Table %s holds %s rows", self.count_table, count)
