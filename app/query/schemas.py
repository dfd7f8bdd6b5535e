"""
Predicate and sort types for the task query system.

Predicates form an immutable tree of tagged variants. Leaves reference
columns by field name, so the tree can be built and compared without a
database; app.query.builder translates it into SQLAlchemy expressions.
"""

from typing import Any, Iterable, Optional, Tuple, Union
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CombineOperator(str, Enum):
    """How the per-field predicates of a request are joined."""

    AND = "and"
    OR = "or"


# ===== LEAF PREDICATES =====


@dataclass(frozen=True)
class Eq:
    column: str
    value: Any


@dataclass(frozen=True)
class NotEq:
    column: str
    value: Any


@dataclass(frozen=True)
class Like:
    """Case-insensitive pattern match using SQL wildcards (% and _)."""

    column: str
    pattern: str


@dataclass(frozen=True)
class NotLike:
    column: str
    pattern: str


@dataclass(frozen=True)
class IsNull:
    column: str


@dataclass(frozen=True)
class IsNotNull:
    column: str


@dataclass(frozen=True)
class InList:
    column: str
    values: Tuple[str, ...]


@dataclass(frozen=True)
class NotInList:
    column: str
    values: Tuple[str, ...]


@dataclass(frozen=True)
class Range:
    """Inclusive range on both ends."""

    column: str
    lower: datetime
    upper: datetime


# ===== COMBINATORS =====


@dataclass(frozen=True)
class And:
    items: Tuple["Predicate", ...]


@dataclass(frozen=True)
class Or:
    items: Tuple["Predicate", ...]


Predicate = Union[Eq, NotEq, Like, NotLike, IsNull, IsNotNull, InList, NotInList, Range, And, Or]


def combine(
    predicates: Iterable[Optional[Predicate]],
    operator: Optional[CombineOperator] = None,
) -> Optional[Predicate]:
    """
    Join predicates with AND (the default) or OR, skipping absent entries.

    Returns None when nothing is left, and the predicate itself when only
    one remains.
    """
    present = tuple(p for p in predicates if p is not None)
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    if operator == CombineOperator.OR:
        return Or(present)
    return And(present)


@dataclass(frozen=True)
class SortSpec:
    column: str
    direction: SortDirection = SortDirection.DESC

    @classmethod
    def parse(cls, sort: Optional[str]) -> "SortSpec":
        """
        Parse "<field>.<asc|desc>"; anything other than "asc" sorts descending.

        A missing sort string defaults to newest first.
        """
        parts = [part for part in sort.split(".") if part] if sort else []
        if not parts:
            return cls("created_at", SortDirection.DESC)
        direction = SortDirection.ASC if len(parts) > 1 and parts[1] == "asc" else SortDirection.DESC
        return cls(parts[0], direction)
