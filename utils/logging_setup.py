from __future__ import annotations

import logging
import os
import sys

from config.settings import get_settings


_INITIALIZED: bool = False


class RunIdFilter(logging.Filter):
    """Stamp records with the RUN_ID of the current CLI invocation."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "run_id", None):
            record.run_id = os.getenv("RUN_ID") or "-"
        return True


class LookupFormatter(logging.Formatter):
    """Appends key=value pairs for the lookup extras a record actually carries."""

    FIELDS: tuple[str, ...] = ("step", "status", "provider", "duration_ms", "error")

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        line = super().format(record)
        pairs = [f"{key}={getattr(record, key)}" for key in self.FIELDS if getattr(record, key, None) is not None]
        pairs.append(f"run_id={getattr(record, 'run_id', '-')}")
        return f"{line} {' '.join(pairs)}"


def init_logging(level: str | None = None) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return

    log_level_str = (level or get_settings().log_level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.addFilter(RunIdFilter())
        handler.setFormatter(LookupFormatter(fmt="%(asctime)s %(levelname)s %(name)s %(message)s"))
        root_logger.addHandler(handler)

    _INITIALIZED = True
