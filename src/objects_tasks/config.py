from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _parse_indent(raw: str) -> int | None:
    """Return *raw* as an indent width, or None if it is empty or not a number."""
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring OBJECTS_TASKS_JSON_INDENT=%r: not an integer", raw)
        return None


@dataclass(frozen=True)
class ObjectsTasksConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None keeps output compact
    json_sort_keys: bool = False

    @classmethod
    def from_env(cls) -> ObjectsTasksConfig:
        """Build a config from OBJECTS_TASKS_* environment variables."""
        sort_keys = os.environ.get("OBJECTS_TASKS_JSON_SORT_KEYS", "")
        return cls(
            log_level=os.environ.get("OBJECTS_TASKS_LOG_LEVEL", cls.log_level).upper(),
            json_indent=_parse_indent(os.environ.get("OBJECTS_TASKS_JSON_INDENT", "")),
            json_sort_keys=sort_keys.lower() in ("true", "1", "yes"),
        )
