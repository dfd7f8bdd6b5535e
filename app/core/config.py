# app/core/config.py
"""Environment configuration for the task table service."""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

VALID_ENVIRONMENTS = ("development", "test", "production")


def _env(name: str, default: str) -> str:
    # Empty strings count as unset
    value = os.environ.get(name)
    return value if value else default


def _truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


APP_ENV = _env("APP_ENV", "development").lower()
if APP_ENV not in VALID_ENVIRONMENTS:
    raise ValueError(f"APP_ENV must be one of {VALID_ENVIRONMENTS}, got '{APP_ENV}'")

DATABASE_URL = _env("DATABASE_URL", "sqlite:///./tasks.db")
TABLE_PREFIX = _env("TABLE_PREFIX", "shadcn")
APPLICATION_ID = _env("APPLICATION_ID", "task-table")
SEED_ON_STARTUP = _truthy(_env("SEED_ON_STARTUP", "false"))
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()

SITE_CONFIG = {
    "name": "Table",
    "description": "Task table with server side sorting, pagination, and filtering",
    "url": "http://localhost:8000" if APP_ENV == "development" else "https://tasks.example.com",
}


def table_name(name: str) -> str:
    """Apply the shared table prefix so several projects can use one database."""
    return f"{TABLE_PREFIX}_{name}"


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
