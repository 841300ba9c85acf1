"""Shared helpers for Supabase-backed repositories."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from postgrest.exceptions import APIError

from attraction_dashboard.domain.errors import StoreError
from attraction_dashboard.domain.filters import Predicate

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
# Supabase's default PostgREST max_rows.
PAGE_SIZE = 1000

_CONSTRAINT_VIOLATIONS = {UNIQUE_VIOLATION, FOREIGN_KEY_VIOLATION}


class _Executable(Protocol):
    def execute(self) -> Any:  # noqa: ANN401
        """Run the request."""


def _run(query: _Executable) -> Any:  # noqa: ANN401
    try:
        return query.execute()
    except APIError as exc:
        if exc.code in _CONSTRAINT_VIOLATIONS:
            raise
        logger.exception("Supabase request failed")
        raise StoreError() from exc


def execute(query: _Executable) -> list[dict[str, Any]]:
    """Run a PostgREST request and return its rows.

    Unique and foreign key violations are re-raised as ``APIError`` so callers
    can map them; every other API failure becomes ``StoreError``.
    """
    return _run(query).data or []


def execute_count(query: _Executable) -> int:
    """Run a ``count="exact"`` request and return the total row count."""
    return int(_run(query).count or 0)


def fetch_all(
    build_query: Callable[[], Any], page_size: int = PAGE_SIZE
) -> list[dict[str, Any]]:
    """Read every row of an ordered query one ``range`` page at a time.

    ``build_query`` must return a fresh, deterministically ordered builder on
    each call. Paging stops at the first short page.
    """
    rows: list[dict[str, Any]] = []
    offset = 0
    while True:
        page = execute(build_query().range(offset, offset + page_size - 1))
        rows.extend(page)
        if len(page) < page_size:
            return rows
        offset += page_size


def apply_predicates(query: Any, predicates: list[Predicate]) -> Any:  # noqa: ANN401
    """Chain each predicate onto a PostgREST filter builder."""
    for predicate in predicates:
        query = getattr(query, predicate.operator)(predicate.column, predicate.value)
    return query


def parse_timestamp(value: object) -> datetime | None:
    """Convert a timestamptz string into a datetime."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
