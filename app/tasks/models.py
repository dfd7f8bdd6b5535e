# app/tasks/models.py
"""Task model and its enumerated columns."""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.core.config import table_name
from app.core.database import Base
from app.tasks.utils import generate_id


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    CANCELED = "canceled"


class TaskLabel(str, enum.Enum):
    BUG = "bug"
    FEATURE = "feature"
    ENHANCEMENT = "enhancement"
    DOCUMENTATION = "documentation"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _enum_column(enum_cls: type) -> SQLEnum:
    # Store the lowercase values so filter tokens compare directly against the column
    return SQLEnum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=30,
    )


class Task(Base):
    """A row of the task table."""

    __tablename__ = table_name("tasks")

    id: Mapped[str] = mapped_column(String(30), primary_key=True, default=generate_id)
    code: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    title: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        _enum_column(TaskStatus), nullable=False, default=TaskStatus.TODO
    )
    label: Mapped[TaskLabel] = mapped_column(
        _enum_column(TaskLabel), nullable=False, default=TaskLabel.BUG
    )
    priority: Mapped[TaskPriority] = mapped_column(
        _enum_column(TaskPriority), nullable=False, default=TaskPriority.LOW
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, default=datetime.now, onupdate=datetime.now
    )
