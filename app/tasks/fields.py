# app/tasks/fields.py
"""Registry of task fields available to filtering and sorting."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class FieldDataType(str, Enum):
    TEXT = "text"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class TaskField:
    """A public field name and how the query layer treats it."""

    name: str
    attribute: str
    is_selectable: bool = False
    data_type: FieldDataType = FieldDataType.TEXT


TASK_FIELDS: Dict[str, TaskField] = {
    field.name: field
    for field in (
        TaskField("id", "id"),
        TaskField("code", "code"),
        TaskField("title", "title"),
        TaskField("status", "status", is_selectable=True),
        TaskField("label", "label", is_selectable=True),
        TaskField("priority", "priority", is_selectable=True),
        TaskField("created_at", "created_at", data_type=FieldDataType.TIMESTAMP),
        TaskField("updated_at", "updated_at", data_type=FieldDataType.TIMESTAMP),
    )
}

# Clients built against the camelCase column names still sort correctly
FIELD_ALIASES: Dict[str, str] = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

# The text and selectable filters accepted by the task list query
FILTERABLE_FIELDS = ("title", "status", "priority")


def column_map() -> Dict[str, str]:
    """Public name (including aliases) -> model attribute name."""
    columns = {name: field.attribute for name, field in TASK_FIELDS.items()}
    columns.update({alias: TASK_FIELDS[target].attribute for alias, target in FIELD_ALIASES.items()})
    return columns
