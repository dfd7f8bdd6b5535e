"""Pydantic schemas for the logging module API."""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class LogRead(BaseModel):
    id: int
    timestamp: datetime
    method: str
    path: str
    query_string: Optional[str] = None
    status_code: int
    client_ip: Optional[str] = None
    request_body: Optional[str] = None
    response_body: Optional[str] = None
    processing_time: Optional[float] = None  # in milliseconds
    user_agent: Optional[str] = None
    hostname: Optional[str] = None
    application_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class StatusCount(BaseModel):
    status_code: int
    count: int


class StatusDistribution(BaseModel):
    status_distribution: List[StatusCount]
    period_hours: int
    timestamp: datetime
