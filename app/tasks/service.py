# app/tasks/service.py
"""Service layer for the tasks module: the list query, group counts and mutations."""

import logging
import math
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.base_service import BaseService
from app.query import PredicateBuilder, Predicate, Range, SortSpec, combine, filter_column
from app.tasks.dao import TaskDAO
from app.tasks.fields import TASK_FIELDS, FILTERABLE_FIELDS, column_map
from app.tasks.models import Task
from app.tasks.schemas import (
    ActionResult,
    GetTasksParams,
    TaskCount,
    TaskCreate,
    TaskListResponse,
    TaskRead,
    TasksBulkUpdate,
    TasksDelete,
    TaskUpdate,
)
from app.tasks.utils import generate_code, generate_id, generate_random_task

logger = logging.getLogger(__name__)

MAX_TASK_LIMIT = 15
MIN_TASK_COUNT = 5
DATE_RANGE_FIELD = "created_at"


class TaskRuleError(ValueError):
    """A mutation was refused by a task table rule."""


def _error_message(exc: Exception, fallback: str) -> str:
    message = str(exc)
    return message if message else fallback


def _naive_utc(value: datetime) -> datetime:
    # Timestamps are stored without a zone
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class TaskService(BaseService[Task, TaskCreate, TaskUpdate, TaskRead]):
    """Task service extending BaseService with the filtered list query and task rules."""

    response_model = TaskRead

    def __init__(self, dao: TaskDAO):
        super().__init__(dao)
        self.task_dao = dao
        self.builder = PredicateBuilder(Task, column_map(), fallback_sort_column="id")

    # ===== LIST QUERY =====

    @staticmethod
    def build_date_range(from_: Optional[datetime], to: Optional[datetime]) -> Optional[Predicate]:
        """Range on created_at, only when both bounds are given."""
        if from_ is None or to is None:
            return None
        return Range(DATE_RANGE_FIELD, _naive_utc(from_), _naive_utc(to))

    @staticmethod
    def build_where(params: GetTasksParams) -> Optional[Predicate]:
        """Compile every present filter and join them with the requested operator."""
        predicates = []
        for name in FILTERABLE_FIELDS:
            raw_value = getattr(params, name)
            if raw_value:
                predicates.append(filter_column(name, raw_value, TASK_FIELDS[name].is_selectable))
        predicates.append(TaskService.build_date_range(params.from_, params.to))
        return combine(predicates, params.operator)

    def get_tasks(self, params: GetTasksParams) -> TaskListResponse:
        """
        Get one page of tasks with the total row and page counts.

        Storage failures are logged and reported as an empty result rather
        than raised.
        """
        try:
            offset = (params.page - 1) * params.per_page
            predicate = self.build_where(params)
            where = self.builder.build(predicate) if predicate is not None else None
            order_by = self.builder.build_order_by(SortSpec.parse(params.sort))

            with self.task_dao.read_snapshot() as snapshot:
                rows = snapshot.get_page(where, order_by, limit=params.per_page, offset=offset)
                total_rows = snapshot.count_where(where)
                data = [self._to_response(row) for row in rows]

            page_count = math.ceil(total_rows / params.per_page)
            return TaskListResponse(data=data, total_rows=total_rows, page_count=page_count)
        except Exception:
            logger.exception("Error fetching tasks")
            return TaskListResponse(data=[], total_rows=0, page_count=0)

    # ===== GROUP COUNTS =====

    def _count_by(self, field_name: str) -> List[TaskCount]:
        try:
            return [
                TaskCount(**{field_name: value, "count": count})
                for value, count in self.task_dao.count_grouped_by(field_name)
            ]
        except Exception:
            logger.exception("Error counting tasks by %s", field_name)
            return []

    def get_task_count_by_status(self) -> List[TaskCount]:
        return self._count_by("status")

    def get_task_count_by_priority(self) -> List[TaskCount]:
        return self._count_by("priority")

    # ===== MUTATIONS =====

    def _rollback(self) -> None:
        try:
            self.task_dao.db.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")

    def _validate_create(self, create_data: TaskCreate) -> None:
        if self.task_dao.count() >= MAX_TASK_LIMIT:
            raise TaskRuleError(
                f"Task limit reached. You cannot have more than {MAX_TASK_LIMIT} tasks. "
                "If you want to create a new task, please delete a previous task first."
            )

    def create_task(self, create_data: TaskCreate) -> ActionResult:
        """Create a task with a generated id and code."""
        try:
            self.create(create_data, id=generate_id(), code=generate_code())
            return ActionResult()
        except Exception as e:
            self._rollback()
            logger.warning("Task creation failed: %s", e)
            return ActionResult(error=_error_message(e, "An error occurred while creating the task."))

    def update_task(self, task_id: str, update_data: TaskUpdate) -> ActionResult:
        """Update the fields the caller set; updated_at is refreshed by the model."""
        try:
            if self.update(task_id, update_data) is None:
                return ActionResult(error="Task not found")
            return ActionResult()
        except Exception as e:
            self._rollback()
            logger.warning("Task update failed for %s: %s", task_id, e)
            return ActionResult(error=_error_message(e, "An error occurred while updating the task."))

    def update_tasks(self, update_data: TasksBulkUpdate) -> ActionResult:
        """Apply label, status and priority changes to several tasks at once."""
        try:
            values = update_data.model_dump(exclude_none=True, exclude={"ids"})
            self.task_dao.update_many(update_data.ids, **values)
            return ActionResult()
        except Exception as e:
            self._rollback()
            logger.warning("Bulk task update failed: %s", e)
            return ActionResult(error=_error_message(e, "An error occurred while updating the tasks."))

    def delete_task(self, task_id: str) -> ActionResult:
        try:
            if not self.delete(task_id):
                return ActionResult(error="Task not found")
            return ActionResult()
        except Exception as e:
            self._rollback()
            logger.warning("Task deletion failed for %s: %s", task_id, e)
            return ActionResult(error=_error_message(e, "An error occurred while deleting the task."))

    def delete_tasks(self, delete_data: TasksDelete) -> ActionResult:
        """Delete several tasks, keeping at least MIN_TASK_COUNT in the table."""
        try:
            remaining = self.task_dao.count() - len(delete_data.ids)
            if remaining < MIN_TASK_COUNT:
                raise TaskRuleError(
                    f"Cannot delete the tasks. You must have at least {MIN_TASK_COUNT} "
                    "tasks in the database after deletion."
                )
            self.task_dao.delete_many(delete_data.ids)
            return ActionResult()
        except Exception as e:
            self._rollback()
            logger.warning("Bulk task deletion failed: %s", e)
            return ActionResult(error=_error_message(e, "An error occurred while deleting the tasks."))

    # ===== EXPORT AND SEEDING =====

    def get_chunked_tasks(self, chunk_size: int = 1000) -> ActionResult:
        """Read the whole table in chunks of ``chunk_size`` rows."""
        try:
            total = self.task_dao.count()
            chunks = math.ceil(total / chunk_size)
            tasks: List[dict] = []
            for index in range(chunks):
                rows = self.task_dao.get_chunk(offset=index * chunk_size, limit=chunk_size)
                tasks.extend(self._to_response(row).model_dump(mode="json", by_alias=True) for row in rows)
            return ActionResult(data=tasks)
        except Exception as e:
            logger.warning("Chunked task export failed: %s", e)
            return ActionResult(error=_error_message(e, "An error occurred while exporting the tasks."))

    def seed_tasks(self, count: int = 100) -> None:
        """Replace every task with ``count`` random ones."""
        try:
            rows = [generate_random_task() for _ in range(count)]
            logger.info("Inserting %s tasks", len(rows))
            self.task_dao.replace_all(rows)
        except Exception:
            self._rollback()
            logger.exception("Error seeding tasks")
