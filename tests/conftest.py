"""
Test configuration and shared fixtures for the task table test suite.
Provides database setup, a test client, and task factories.
"""

import os
import tempfile

# Point the application at a throwaway database before any app module is imported
_TEST_DB_DIR = tempfile.mkdtemp(prefix="task-table-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ["APP_ENV"] = "test"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from datetime import datetime, timedelta
from typing import Callable, List
from fastapi.testclient import TestClient

from app.app import create_app
from app.core.database import SessionLocal, create_all_tables, drop_all_tables
from app.tasks.models import Task, TaskStatus, TaskLabel, TaskPriority


# ===== DATABASE SETUP =====

@pytest.fixture(scope="function")
def db_session():
    """Create a fresh schema and a session for each test"""
    drop_all_tables()
    create_all_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """Create FastAPI test client bound to the test database"""
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


# ===== SAMPLE DATA FIXTURES =====

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def make_task(db_session) -> Callable[..., Task]:
    """Factory inserting one task; index drives id, code and created_at"""

    def _make(index: int, **overrides) -> Task:
        values = {
            "id": f"task{index:02d}",
            "code": f"TASK-{1000 + index}",
            "title": f"Task {index:02d}",
            "status": TaskStatus.TODO,
            "label": TaskLabel.BUG,
            "priority": TaskPriority.LOW,
            "created_at": BASE_TIME + timedelta(days=index),
            "updated_at": BASE_TIME + timedelta(days=index),
        }
        values.update(overrides)
        task = Task(**values)
        db_session.add(task)
        db_session.commit()
        return task

    return _make


@pytest.fixture
def twelve_tasks(make_task) -> List[Task]:
    """Twelve tasks titled "Task 01" .. "Task 12", created one day apart"""
    return [make_task(i) for i in range(1, 13)]


@pytest.fixture
def mixed_tasks(make_task) -> List[Task]:
    """A small set with varied status, priority and titles"""
    return [
        make_task(1, title="Fix login bug", status=TaskStatus.TODO, priority=TaskPriority.HIGH),
        make_task(2, title="Write docs", status=TaskStatus.DONE, priority=TaskPriority.LOW),
        make_task(3, title="Refactor billing", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.MEDIUM),
        make_task(4, title=None, status=TaskStatus.CANCELED, priority=TaskPriority.LOW),
        make_task(5, title="Add login audit", status=TaskStatus.DONE, priority=TaskPriority.HIGH),
        make_task(6, title="Plan sprint", status=TaskStatus.TODO, priority=TaskPriority.MEDIUM),
    ]
