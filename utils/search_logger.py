from __future__ import annotations

import hashlib
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def sha256_text(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    # Queries taken from argv may carry lone surrogates
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


def log_call(
    *,
    caller: str,
    provider: str,
    operation: str,
    query: Optional[str] = None,
    duration_ms: Optional[int] = None,
    status: str = "ok",
    error: Optional[str] = None,
    http_status: Optional[int] = None,
    result_count: Optional[int] = None,
) -> None:
    """Append a single JSON line describing a search proxy call if tracing is enabled.

    Controlled by SEARCH_TRACE / SEARCH_LOG_PATH in config/settings.py.
    Trace failures are logged as warnings and never reach the caller.
    """
    from config.settings import get_settings
    # Ensure latest env changes (tests may monkeypatch env between calls)
    get_settings.cache_clear()
    settings = get_settings()
    if not settings.search_trace:
        return

    log_path = Path(settings.search_log_path)
    try:
        payload: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "caller": caller,
            "provider": provider,
            "operation": operation,
            "query": query,
            "query_hash": sha256_text(query),
            "duration_ms": duration_ms,
            "status": status,
            "error": error,
            "http_status": http_status,
            "result_count": result_count,
        }
        run_id = os.getenv("RUN_ID")
        if run_id:
            payload["run_id"] = run_id

        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except (OSError, ValueError) as e:
        logging.warning(f"Could not write search trace to {log_path}: {e}")
