# app/tasks/utils.py
"""Identifier generation and random task data for seeding."""

import random
import secrets
import string
from datetime import datetime
from typing import Any, Dict

ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 16
CODE_PREFIX = "TASK-"

_TITLE_VERBS = ["parse", "index", "compress", "override", "navigate", "synthesize", "bypass", "back up", "quantify", "calculate"]
_TITLE_ADJECTIVES = ["virtual", "primary", "optical", "redundant", "neural", "mobile", "auxiliary", "digital", "open-source", "wireless"]
_TITLE_NOUNS = ["pixel", "protocol", "bus", "monitor", "array", "firewall", "driver", "matrix", "card", "bandwidth"]


def generate_id(length: int = ID_LENGTH) -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def generate_code() -> str:
    """Short human readable code, e.g. TASK-0427."""
    return CODE_PREFIX + "".join(secrets.choice(string.digits) for _ in range(4))


def generate_title() -> str:
    phrase = (
        f"{random.choice(_TITLE_VERBS)} the {random.choice(_TITLE_ADJECTIVES)} "
        f"{random.choice(_TITLE_NOUNS)}"
    )
    return phrase[0].upper() + phrase[1:]


def generate_random_task() -> Dict[str, Any]:
    """Column values for one random task."""
    # Imported here to avoid a circular import with app.tasks.models
    from app.tasks.models import TaskStatus, TaskLabel, TaskPriority

    now = datetime.now()
    return {
        "id": generate_id(),
        "code": generate_code(),
        "title": generate_title(),
        "status": random.choice(list(TaskStatus)),
        "label": random.choice(list(TaskLabel)),
        "priority": random.choice(list(TaskPriority)),
        "created_at": now,
        "updated_at": now,
    }
