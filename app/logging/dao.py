# app/logging/dao.py
"""Data Access Object for request logs using BaseDAO."""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import select, func, desc
from sqlalchemy.orm import Session

from app.core.base_dao import BaseDAO
from app.logging.models import Log
from app.query import PredicateBuilder, filter_column

LOG_COLUMNS = {"path": "path"}


class LogDAO(BaseDAO[Log]):
    """DAO for Log operations."""

    def __init__(self, db_session: Session):
        super().__init__(Log, db_session)
        self.builder = PredicateBuilder(Log, LOG_COLUMNS)

    def _filtered(
        self,
        query,
        hours: int,
        status_min: Optional[int],
        status_max: Optional[int],
        path: Optional[str],
    ):
        time_threshold = datetime.now() - timedelta(hours=hours)
        query = query.where(self.model.timestamp >= time_threshold)

        if status_min is not None:
            query = query.where(self.model.status_code >= status_min)
        if status_max is not None:
            query = query.where(self.model.status_code <= status_max)

        # Path filters use the same "value~operator" syntax as the task table
        predicate = filter_column("path", path) if path else None
        if predicate is not None:
            query = query.where(self.builder.build(predicate))
        return query

    def get_logs_with_filters(
        self,
        limit: int = 50,
        offset: int = 0,
        hours: int = 24,
        status_min: Optional[int] = None,
        status_max: Optional[int] = None,
        path: Optional[str] = None,
    ) -> List[Log]:
        """Get the most recent logs matching the filters."""
        query = self._filtered(select(self.model), hours, status_min, status_max, path)
        query = query.order_by(desc(self.model.timestamp)).offset(offset).limit(limit)
        return list(self.db.execute(query).scalars().all())

    def count_logs_with_filters(
        self,
        hours: int = 24,
        status_min: Optional[int] = None,
        status_max: Optional[int] = None,
        path: Optional[str] = None,
    ) -> int:
        query = self._filtered(
            select(func.count()).select_from(self.model), hours, status_min, status_max, path
        )
        return self.db.execute(query).scalar_one()

    def get_status_distribution(self, hours: int = 24) -> List[Dict[str, Any]]:
        """Get log counts per status code within the time window."""
        time_threshold = datetime.now() - timedelta(hours=hours)
        query = (
            select(self.model.status_code, func.count())
            .where(self.model.timestamp >= time_threshold)
            .group_by(self.model.status_code)
            .order_by(self.model.status_code)
        )
        return [{"status_code": code, "count": count} for code, count in self.db.execute(query).all()]
