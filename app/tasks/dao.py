# app/tasks/dao.py
"""Data Access Object for tasks using BaseDAO."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from sqlalchemy import select, func, update, delete, insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.core.base_dao import BaseDAO
from app.tasks.models import Task


class TaskDAO(BaseDAO[Task]):
    """Task-specific DAO extending BaseDAO with filtered, paged and grouped reads."""

    def __init__(self, db_session: Session):
        super().__init__(Task, db_session)

    # ===== READ SNAPSHOT =====

    @contextmanager
    def read_snapshot(self) -> Iterator["TaskDAO"]:
        """Run several reads inside one transaction so they observe the same data."""
        if self.db.in_transaction():
            # Already inside a transaction; its snapshot is the one to use
            yield self
            return
        with self.db.begin():
            yield self

    def get_page(
        self,
        where: Optional[ColumnElement],
        order_by: ColumnElement,
        limit: int,
        offset: int,
    ) -> List[Task]:
        """Get one page of tasks matching ``where``."""
        query = select(Task)
        if where is not None:
            query = query.where(where)
        query = query.order_by(order_by).limit(limit).offset(offset)
        return list(self.db.execute(query).scalars().all())

    def count_where(self, where: Optional[ColumnElement]) -> int:
        """Count tasks matching ``where``, ignoring pagination."""
        query = select(func.count()).select_from(Task)
        if where is not None:
            query = query.where(where)
        return self.db.execute(query).scalar_one()

    def count_grouped_by(self, field_name: str) -> List[Tuple[Any, int]]:
        """Get (value, count) pairs for each distinct value of a column."""
        column = getattr(Task, field_name)
        query = select(column, func.count()).group_by(column).order_by(column)
        return [(value, count) for value, count in self.db.execute(query).all()]

    def get_chunk(self, offset: int, limit: int) -> List[Task]:
        query = select(Task).order_by(Task.id).offset(offset).limit(limit)
        return list(self.db.execute(query).scalars().all())

    # ===== BULK WRITES =====

    def update_many(self, ids: List[str], **values) -> int:
        """Set ``values`` on every task in ``ids``; updated_at is refreshed by the column default."""
        if not values:
            return 0
        stmt = update(Task).where(Task.id.in_(ids)).values(**values)
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def delete_many(self, ids: List[str]) -> int:
        result = self.db.execute(delete(Task).where(Task.id.in_(ids)))
        self.db.commit()
        return result.rowcount

    def replace_all(self, rows: List[Dict[str, Any]]) -> None:
        """Delete every task and insert ``rows``, skipping rows whose code already exists."""
        self.db.execute(delete(Task))
        if rows:
            self.db.execute(self._insert_ignoring_conflicts(), rows)
        self.db.commit()

    def _insert_ignoring_conflicts(self):
        dialect = self.db.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite.insert(Task).on_conflict_do_nothing()
        if dialect == "postgresql":
            return postgresql.insert(Task).on_conflict_do_nothing()
        return insert(Task)
