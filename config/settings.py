from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_SERP_SEARCH_URL = "https://asia-south1-circleup-63110.cloudfunctions.net/serpSearch"


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    serp_search_url: str
    request_timeout_seconds: int

    log_level: str

    # Core/runtime
    run_env: str

    # Logging/tracing
    search_trace: bool = False
    search_log_path: str = "logs/search_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    serp_search_url = os.getenv("SERP_SEARCH_URL", DEFAULT_SERP_SEARCH_URL).strip()
    if not serp_search_url:
        raise RuntimeError("SERP_SEARCH_URL must not be empty")
    return Settings(
        serp_search_url=serp_search_url,
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        search_trace=_as_bool(os.getenv("SEARCH_TRACE")),
        search_log_path=os.getenv("SEARCH_LOG_PATH", "logs/search_calls.jsonl"),
    )
