"""
Builders for dynamic, parameterized SQL fragments.

Both builders are pure: they return a clause that uses PostgreSQL-style
positional placeholders ($1, $2, ...) together with the list of values to
bind, where placeholder ``$i`` always binds to ``values[i - 1]``.
"""

from enum import Enum
from typing import Any, List, Mapping, NamedTuple, Optional

from jobly.core.errors import EmptyUpdateError, InvalidRangeError, UnknownFilterError


class SetClause(NamedTuple):
    set_cols: str
    values: List[Any]


class WhereClause(NamedTuple):
    where_clause: str
    values: List[Any]


class SearchFilter(str, Enum):
    """Recognized company search filters."""
    NAME_LIKE = "nameLike"
    MIN_EMPLOYEES = "minEmployees"
    MAX_EMPLOYEES = "maxEmployees"


# Condition template per filter; "{}" is replaced by the placeholder index
_SEARCH_CONDITIONS = {
    SearchFilter.NAME_LIKE: "name ILIKE '%' || ${} || '%'",
    SearchFilter.MIN_EMPLOYEES: "num_employees >= ${}",
    SearchFilter.MAX_EMPLOYEES: "num_employees <= ${}",
}


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Optional[Mapping[str, str]] = None,
) -> SetClause:
    """
    Build the SET part of an UPDATE from a sparse field map.

    Args:
        data: Fields to change, e.g. {"firstName": "Aliya", "age": 32}
        column_map: Logical field name -> column name, e.g.
            {"numEmployees": "num_employees"}. Unmapped fields are used as-is.

    Returns:
        SetClause('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        EmptyUpdateError: If data has no keys
    """
    if not data:
        raise EmptyUpdateError()

    column_map = column_map or {}
    cols = [
        f'"{column_map.get(key, key)}"=${idx}'
        for idx, key in enumerate(data, start=1)
    ]

    return SetClause(", ".join(cols), list(data.values()))


def sql_for_search(filters: Mapping[str, Any]) -> WhereClause:
    """
    Build a WHERE clause for searching companies.

    Args:
        filters: Any of nameLike, minEmployees, maxEmployees

    Returns:
        WhereClause("WHERE num_employees >= $1 AND num_employees <= $2", [5, 40]),
        or WhereClause("", []) when no filters are given.

    Raises:
        UnknownFilterError: If a key is not a recognized filter
        InvalidRangeError: If minEmployees is greater than maxEmployees
    """
    try:
        parsed = {SearchFilter(key): value for key, value in filters.items()}
    except ValueError as e:
        raise UnknownFilterError(f"Unrecognized search filter: {e}") from e

    min_employees = parsed.get(SearchFilter.MIN_EMPLOYEES)
    max_employees = parsed.get(SearchFilter.MAX_EMPLOYEES)
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidRangeError()

    if not parsed:
        return WhereClause("", [])

    clauses = [
        _SEARCH_CONDITIONS[key].format(idx)
        for idx, key in enumerate(parsed, start=1)
    ]

    return WhereClause("WHERE " + " AND ".join(clauses), list(parsed.values()))
