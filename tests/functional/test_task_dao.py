"""
TaskDAO tests against the real SQLite database.
"""

from sqlalchemy import insert

from app.core.database import SessionLocal, engine
from app.tasks.dao import TaskDAO
from app.tasks.models import Task


def _insert_from_another_connection(task_id: str, code: str) -> None:
    with engine.begin() as conn:
        conn.execute(insert(Task).values(id=task_id, code=code, title="Late arrival"))


class TestReadSnapshot:
    def test_page_and_count_ignore_concurrent_commits(self, twelve_tasks):
        session = SessionLocal()
        dao = TaskDAO(session)
        try:
            with dao.read_snapshot() as snapshot:
                rows = snapshot.get_page(None, Task.id.asc(), limit=100, offset=0)
                _insert_from_another_connection("late01", "TASK-9001")
                total_rows = snapshot.count_where(None)
        finally:
            session.close()

        assert len(rows) == 12
        assert total_rows == 12

    def test_commits_are_visible_after_the_snapshot(self, twelve_tasks):
        session = SessionLocal()
        dao = TaskDAO(session)
        try:
            with dao.read_snapshot() as snapshot:
                snapshot.get_page(None, Task.id.asc(), limit=100, offset=0)
                _insert_from_another_connection("late01", "TASK-9001")

            assert dao.count_where(None) == 13
        finally:
            session.close()

    def test_snapshot_reuses_an_open_transaction(self, db_session, twelve_tasks):
        dao = TaskDAO(db_session)
        db_session.begin()

        with dao.read_snapshot() as snapshot:
            assert snapshot.count_where(None) == 12

        assert db_session.in_transaction()
        db_session.rollback()
