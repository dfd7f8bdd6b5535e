"""
Translate predicate trees and sort specs into SQLAlchemy expressions.

The builder is bound to a mapped model and a mapping of public field names
to model attribute names, so callers can use names such as "createdAt"
while the model exposes "created_at".
"""

from typing import Dict, Optional, Any
from sqlalchemy import and_, or_, not_, true, false
from sqlalchemy.sql.elements import ColumnElement

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
    Range,
    And,
    Or,
    SortSpec,
    SortDirection,
)


class PredicateBuilder:
    """Builds WHERE and ORDER BY clauses for one model."""

    def __init__(self, model: Any, columns: Dict[str, str], fallback_sort_column: str = "id"):
        self.model = model
        self.columns = columns
        self.fallback_sort_column = fallback_sort_column

    def resolve_column(self, name: str) -> Optional[Any]:
        attribute = self.columns.get(name)
        if attribute is None:
            return None
        return getattr(self.model, attribute)

    def _column(self, name: str) -> Any:
        column = self.resolve_column(name)
        if column is None:
            raise ValueError(f"Unknown column '{name}' for {self.model.__name__}")
        return column

    def build(self, predicate: Predicate) -> ColumnElement:
        """Convert a predicate tree into a SQLAlchemy boolean expression."""
        if isinstance(predicate, And):
            return and_(true(), *(self.build(item) for item in predicate.items))
        if isinstance(predicate, Or):
            return or_(false(), *(self.build(item) for item in predicate.items))

        column = self._column(predicate.column)
        if isinstance(predicate, Eq):
            return column == predicate.value
        if isinstance(predicate, NotEq):
            return not_(column == predicate.value)
        if isinstance(predicate, Like):
            return column.ilike(predicate.pattern)
        if isinstance(predicate, NotLike):
            return column.not_ilike(predicate.pattern)
        if isinstance(predicate, IsNull):
            return column.is_(None)
        if isinstance(predicate, IsNotNull):
            return column.is_not(None)
        if isinstance(predicate, InList):
            return column.in_(predicate.values)
        if isinstance(predicate, NotInList):
            return not_(column.in_(predicate.values))
        if isinstance(predicate, Range):
            return and_(column >= predicate.lower, column <= predicate.upper)
        raise TypeError(f"Unsupported predicate type: {type(predicate).__name__}")

    def build_order_by(self, sort: SortSpec) -> ColumnElement:
        """Order by the requested column, or by the fallback column descending if it is unknown."""
        column = self.resolve_column(sort.column)
        if column is None:
            return getattr(self.model, self.fallback_sort_column).desc()
        if sort.direction == SortDirection.ASC:
            return column.asc()
        return column.desc()
