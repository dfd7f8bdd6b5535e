# app/core/database.py
"""Database configuration: engine, session factory and table initialization."""

import logging
from sqlalchemy import create_engine, event, select, func
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import DATABASE_URL, SEED_ON_STARTUP

logger = logging.getLogger(__name__)

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)


if engine.dialect.name == "sqlite":
    # pysqlite only opens a transaction before writes, so reads inside
    # Session.begin() would not share a snapshot. Emit BEGIN ourselves.
    @event.listens_for(engine, "connect")
    def _sqlite_on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        # WAL lets writers commit while a read snapshot is open
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _sqlite_on_begin(conn):
        conn.exec_driver_sql("BEGIN")


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)
Base = declarative_base()


def get_db():
    """Get a database session for the duration of a request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _import_models():
    # Models must be imported so they register with Base.metadata
    from app.tasks.models import Task  # noqa: F401
    from app.logging.models import Log  # noqa: F401


def create_all_tables():
    _import_models()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def drop_all_tables():
    """Drop all tables (use with caution!)."""
    _import_models()
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def seed_if_empty(count: int = 100) -> None:
    """Populate the tasks table with random tasks when it holds none."""
    from app.tasks.dao import TaskDAO
    from app.tasks.models import Task
    from app.tasks.service import TaskService

    with SessionLocal() as session:
        existing = session.execute(select(func.count()).select_from(Task)).scalar_one()
        if existing > 0:
            logger.info("Tasks already exist (%s found). Skipping seed.", existing)
            return
        TaskService(TaskDAO(session)).seed_tasks(count)


def init_db(force_recreate: bool = False):
    """Create tables and optionally seed sample tasks."""
    if force_recreate:
        drop_all_tables()
    create_all_tables()
    if SEED_ON_STARTUP:
        seed_if_empty()


if __name__ == "__main__":
    # Allow running this file directly to initialize the database
    init_db()
