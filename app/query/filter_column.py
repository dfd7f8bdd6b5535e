"""
Compile compact filter strings into predicates.

A filter string has the form ``<value>`` or ``<value>~<operator>``. For
selectable (enum-like) columns the value is a ``.``-separated list of tokens,
e.g. ``"todo.done~eq"``. Unknown operators fall back to the most common
filter for the column kind instead of failing the request.
"""

from typing import Optional

from .schemas import (
    Predicate,
    Eq,
    NotEq,
    Like,
    NotLike,
    IsNull,
    IsNotNull,
    InList,
    NotInList,
)

FILTER_DELIMITER = "~"
TOKEN_DELIMITER = "."


def _tokens(value: str) -> tuple:
    return tuple(token for token in value.split(TOKEN_DELIMITER) if token)


def filter_column(column: str, value: Optional[str], is_selectable: bool = False) -> Optional[Predicate]:
    """Return the predicate for ``value`` on ``column``, or None when the value is empty."""
    # Nothing before the first "~" means the field is not filtered, e.g. "~eq"
    if not value or value.startswith(FILTER_DELIMITER):
        return None
    segments = [segment for segment in value.split(FILTER_DELIMITER) if segment]

    filter_value = segments[0].lower()
    filter_operator = segments[1] if len(segments) > 1 else None

    if is_selectable:
        if filter_operator == "eq":
            return InList(column, _tokens(filter_value))
        if filter_operator == "notEq":
            return NotInList(column, _tokens(filter_value))
        if filter_operator == "isNull":
            return IsNull(column)
        if filter_operator == "isNotNull":
            return IsNotNull(column)
        # Default keeps empty tokens, unlike the explicit "eq"
        return InList(column, tuple(filter_value.split(TOKEN_DELIMITER)))

    if filter_operator == "notIlike":
        return NotLike(column, f"%{filter_value}%")
    if filter_operator == "startsWith":
        return Like(column, f"{filter_value}%")
    if filter_operator == "endsWith":
        return Like(column, f"%{filter_value}")
    if filter_operator == "eq":
        return Eq(column, filter_value)
    if filter_operator == "notEq":
        return NotEq(column, filter_value)
    if filter_operator == "isNull":
        return IsNull(column)
    if filter_operator == "isNotNull":
        return IsNotNull(column)
    # "ilike" and anything unrecognised
    return Like(column, f"%{filter_value}%")
