# app/tasks/schemas.py
"""Pydantic schemas for the tasks module API."""

from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.query.schemas import CombineOperator
from app.tasks.models import TaskStatus, TaskLabel, TaskPriority


class CamelModel(BaseModel):
    """Serializes as camelCase while accepting either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ===== TASK SCHEMAS =====


class TaskBase(CamelModel):
    title: Optional[str] = Field(None, max_length=128)
    status: TaskStatus = TaskStatus.TODO
    label: TaskLabel = TaskLabel.BUG
    priority: TaskPriority = TaskPriority.LOW


class TaskCreate(TaskBase):
    model_config = ConfigDict(extra="forbid")


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(None, max_length=128)
    status: Optional[TaskStatus] = None
    label: Optional[TaskLabel] = None
    priority: Optional[TaskPriority] = None

    model_config = ConfigDict(extra="forbid")


class TasksBulkUpdate(CamelModel):
    ids: List[str] = Field(min_length=1)
    status: Optional[TaskStatus] = None
    label: Optional[TaskLabel] = None
    priority: Optional[TaskPriority] = None

    model_config = ConfigDict(extra="forbid")


class TasksDelete(CamelModel):
    ids: List[str] = Field(min_length=1)


class TaskRead(TaskBase):
    id: str
    code: str
    created_at: datetime
    updated_at: Optional[datetime] = None


# ===== QUERY SCHEMAS =====


class GetTasksParams(CamelModel):
    """Input of the task list query: pagination, sort, per-field filters and a date range."""

    page: int = Field(1, ge=1)
    per_page: int = Field(10, ge=1)
    sort: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    operator: CombineOperator = CombineOperator.AND
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None


class TaskListResponse(CamelModel):
    data: List[TaskRead] = []
    total_rows: int = 0
    page_count: int = 0


class TaskCount(CamelModel):
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    count: int


class ActionResult(CamelModel):
    """Outcome of a mutation: errors are reported in the body, never raised."""

    data: Optional[Any] = None
    error: Optional[str] = None
