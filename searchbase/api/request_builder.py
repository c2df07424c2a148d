"""Request body construction and fluent Query building.

Architecture:
    ``build_search_body`` is the single place that turns a Query into the
    JSON body posted to the search endpoint. It is a pure structural
    pass-through: operators, field names and values are not validated.

    ``QueryBuilder`` offers a chainable way to assemble a Query, useful when
    filters are added conditionally or in loops.

Wire rules:
    - ``index`` is always present
    - ``filters``, ``sort`` and ``select`` appear only when non-empty
    - ``limit`` appears only when set and non-zero
    - ``offset`` appears only when strictly greater than zero
"""

from __future__ import annotations

from typing import Any

from ..core.enums import SortDirection
from ..models import Filter, Query, Sort

__all__ = [
    "QueryBuilder",
    "build_search_body",
    "query",
]


def build_search_body(query: Query) -> dict[str, Any]:
    """Build the JSON body for a search request.

    Args:
        query: Query to serialize

    Returns:
        ``{"query": {...}}`` with absent and no-op fields omitted
    """
    payload: dict[str, Any] = {"index": query.index}
    if query.filters:
        payload["filters"] = [f.model_dump(mode="json") for f in query.filters]
    if query.sort:
        payload["sort"] = [s.model_dump(mode="json") for s in query.sort]
    if query.select:
        payload["select"] = list(query.select)
    if query.limit:
        payload["limit"] = query.limit
    if query.offset is not None and query.offset > 0:
        payload["offset"] = query.offset
    return {"query": payload}


class QueryBuilder:
    """Fluent builder for Query instances.

    Example:
        >>> q = (QueryBuilder()
        ...     .index("articles")
        ...     .where("status", "==", "published")
        ...     .order_by("created_at", SortDirection.DESCENDING)
        ...     .select("id", "title")
        ...     .build())
    """

    def __init__(self) -> None:
        self._index: str | None = None
        self._filters: list[Filter] = []
        self._sort: list[Sort] = []
        self._select: list[str] = []
        self._limit: int | None = None
        self._offset: int | None = None

    def index(self, name: str) -> QueryBuilder:
        self._index = name
        return self

    def where(self, field: str, op: str, value: Any) -> QueryBuilder:
        """Append a filter condition."""
        self._filters.append(Filter(field=field, op=op, value=value))
        return self

    def filter(self, condition: Filter) -> QueryBuilder:
        self._filters.append(condition)
        return self

    def order_by(
        self, field: str, direction: SortDirection | str = SortDirection.ASCENDING
    ) -> QueryBuilder:
        """Append a sort key. Earlier keys take precedence."""
        self._sort.append(Sort(field=field, direction=SortDirection(direction)))
        return self

    def select(self, *fields: str) -> QueryBuilder:
        """Restrict returned fields. Duplicates are dropped, order is kept."""
        for name in fields:
            if name not in self._select:
                self._select.append(name)
        return self

    def limit(self, value: int | None) -> QueryBuilder:
        self._limit = value
        return self

    def offset(self, value: int | None) -> QueryBuilder:
        self._offset = value
        return self

    def build(self) -> Query:
        """Build the immutable Query.

        Raises:
            ValueError: If no index was set
        """
        if not self._index:
            raise ValueError("index is required to build a query")
        return Query(
            index=self._index,
            filters=tuple(self._filters),
            sort=tuple(self._sort),
            select=tuple(self._select),
            limit=self._limit,
            offset=self._offset,
        )


def query(index: str) -> QueryBuilder:
    """Start a QueryBuilder for ``index``."""
    return QueryBuilder().index(index)
