# app/logging/service.py
"""Service layer for reading request logs."""

from typing import List, Optional
from datetime import datetime
from fastapi import HTTPException

from app.core.base_service import BaseService
from app.logging.dao import LogDAO
from app.logging.models import Log
from app.logging.schemas import LogRead, StatusCount, StatusDistribution


class LogService(BaseService[Log, LogRead, LogRead, LogRead]):
    """Service for retrieving and summarizing log data."""

    response_model = LogRead

    def __init__(self, log_dao: LogDAO):
        super().__init__(log_dao)
        self.log_dao = log_dao

    def get_logs_with_filters(
        self,
        limit: int = 50,
        offset: int = 0,
        hours: int = 24,
        status_min: Optional[int] = None,
        status_max: Optional[int] = None,
        path: Optional[str] = None,
    ) -> List[LogRead]:
        """Get logs with pagination and filtering."""
        try:
            logs = self.log_dao.get_logs_with_filters(
                limit=limit,
                offset=offset,
                hours=hours,
                status_min=status_min,
                status_max=status_max,
                path=path,
            )
            return [self._to_response(log) for log in logs]
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Error fetching logs: {str(e)}") from e

    def get_logs_count_with_filters(
        self,
        hours: int = 24,
        status_min: Optional[int] = None,
        status_max: Optional[int] = None,
        path: Optional[str] = None,
    ) -> int:
        try:
            return self.log_dao.count_logs_with_filters(
                hours=hours, status_min=status_min, status_max=status_max, path=path
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Error counting logs: {str(e)}") from e

    def get_status_distribution(self, hours: int = 24) -> StatusDistribution:
        try:
            distribution = self.log_dao.get_status_distribution(hours=hours)
        except Exception as e:
            raise HTTPException(
                status_code=500, detail=f"Error generating status distribution: {str(e)}"
            ) from e
        return StatusDistribution(
            status_distribution=[StatusCount(**item) for item in distribution],
            period_hours=hours,
            timestamp=datetime.now(),
        )
