# app/tasks/router.py
"""API router for the tasks module."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import SessionDep
from app.query.schemas import CombineOperator
from app.tasks.dao import TaskDAO
from app.tasks.schemas import (
    ActionResult,
    GetTasksParams,
    TaskCount,
    TaskCreate,
    TaskListResponse,
    TasksBulkUpdate,
    TasksDelete,
    TaskUpdate,
)
from app.tasks.service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


# ===== DEPENDENCY INJECTION =====

def get_task_dao(session: SessionDep) -> TaskDAO:
    """Get TaskDAO instance."""
    return TaskDAO(session)


def get_task_service(dao: TaskDAO = Depends(get_task_dao)) -> TaskService:
    """Get TaskService instance."""
    return TaskService(dao)


# ===== READ ENDPOINTS =====

@router.get("", response_model=TaskListResponse)
def get_tasks(
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=1000),
    sort: Optional[str] = Query(None, description='Sort as "<field>.<asc|desc>"'),
    title: Optional[str] = Query(None, description='Text filter, e.g. "report~startsWith"'),
    status: Optional[str] = Query(None, description='Status tokens, e.g. "todo.done~eq"'),
    priority: Optional[str] = Query(None, description='Priority tokens, e.g. "high~notEq"'),
    operator: CombineOperator = Query(CombineOperator.AND),
    from_: Optional[datetime] = Query(None, alias="from", description="ISO date or datetime, needs 'to'"),
    to: Optional[datetime] = Query(None, description="ISO date or datetime, needs 'from'"),
    service: TaskService = Depends(get_task_service),
) -> TaskListResponse:
    """Get a filtered, sorted page of tasks."""
    params = GetTasksParams(
        page=page,
        per_page=per_page,
        sort=sort,
        title=title,
        status=status,
        priority=priority,
        operator=operator,
        from_=from_,
        to=to,
    )
    return service.get_tasks(params)


@router.get("/count/status", response_model=List[TaskCount], response_model_exclude_none=True)
def get_task_count_by_status(service: TaskService = Depends(get_task_service)) -> List[TaskCount]:
    """Get the number of tasks per status."""
    return service.get_task_count_by_status()


@router.get("/count/priority", response_model=List[TaskCount], response_model_exclude_none=True)
def get_task_count_by_priority(service: TaskService = Depends(get_task_service)) -> List[TaskCount]:
    """Get the number of tasks per priority."""
    return service.get_task_count_by_priority()


@router.get("/export", response_model=ActionResult)
def export_tasks(
    chunk_size: int = Query(1000, ge=1, le=10000),
    service: TaskService = Depends(get_task_service),
) -> ActionResult:
    """Export every task, read in chunks."""
    return service.get_chunked_tasks(chunk_size)


# ===== MUTATION ENDPOINTS =====
# Mutations report failures in the body's "error" field with status 200

@router.post("", response_model=ActionResult)
def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)) -> ActionResult:
    """Create a new task."""
    return service.create_task(task)


@router.patch("", response_model=ActionResult)
def update_tasks(update_data: TasksBulkUpdate, service: TaskService = Depends(get_task_service)) -> ActionResult:
    """Update label, status or priority of several tasks."""
    return service.update_tasks(update_data)


@router.patch("/{task_id}", response_model=ActionResult)
def update_task(
    task_id: str, update_data: TaskUpdate, service: TaskService = Depends(get_task_service)
) -> ActionResult:
    """Update an existing task."""
    return service.update_task(task_id, update_data)


@router.delete("/{task_id}", response_model=ActionResult)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)) -> ActionResult:
    """Delete a task."""
    return service.delete_task(task_id)


@router.post("/delete", response_model=ActionResult)
def delete_tasks(delete_data: TasksDelete, service: TaskService = Depends(get_task_service)) -> ActionResult:
    """Delete several tasks."""
    return service.delete_tasks(delete_data)


@router.post("/seed", response_model=ActionResult)
def seed_tasks(
    count: int = Query(100, ge=1, le=10000),
    service: TaskService = Depends(get_task_service),
) -> ActionResult:
    """Replace all tasks with randomly generated ones."""
    service.seed_tasks(count)
    return ActionResult()
