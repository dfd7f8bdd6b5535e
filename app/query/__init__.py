"""
Query module for the task table.

Main Components:
- filter_column: compiles "value~operator" filter strings into predicates
- PredicateBuilder: turns predicates and sort specs into SQLAlchemy clauses
- Schemas: the immutable predicate tree, combinators and sort types
"""

from .builder import PredicateBuilder
from .filter_column import filter_column
from .schemas import (
    # Predicates
    Predicate,
    Eq,
    NotEq,
    Like,
    NotLike,
    IsNull,
    IsNotNull,
    InList,
    NotInList,
    Range,
    And,
    Or,
    combine,
    # Sorting and combining
    SortSpec,
    SortDirection,
    CombineOperator,
)

__all__ = [
    "PredicateBuilder",
    "filter_column",
    "Predicate",
    "Eq",
    "NotEq",
    "Like",
    "NotLike",
    "IsNull",
    "IsNotNull",
    "InList",
    "NotInList",
    "Range",
    "And",
    "Or",
    "combine",
    "SortSpec",
    "SortDirection",
    "CombineOperator",
]
