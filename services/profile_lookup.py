from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Tuple

from models import LookupOutcome, ProfileLookupResult, SerpResponse
from ports import SearchClientPort


TITLE_DELIMITER = " - "


def split_title(title: Optional[str]) -> Tuple[str, str]:
    """Split a result title into (name, note) on the first " - "."""
    if not title:
        return "", ""
    name, _, note = title.partition(TITLE_DELIMITER)
    return name, note.strip()


def extract_profile(query: str, payload: Any) -> ProfileLookupResult:
    """Map a decoded proxy payload onto the lookup record.

    The record starts as ``name=""``, ``linkedin_url=query``, ``note=""`` and
    is filled from the first organic result when there is one.
    """
    result = ProfileLookupResult(name="", linkedin_url=query, note="")
    logging.debug(f"Initial lookup record: {result.model_dump(by_alias=True)}")

    response = SerpResponse.from_payload(payload)
    if response.organic_results:
        first = response.organic_results[0]
        result.name, result.note = split_title(first.title)
        if first.link:
            result.linkedin_url = first.link
    return result


def _default_searcher() -> SearchClientPort:
    from serp_searcher import SerpSearcher
    return SerpSearcher()


async def _fetch_payload(query: str, searcher: Optional[SearchClientPort]) -> Any:
    searcher = searcher or _default_searcher()
    # requests is blocking; keep the event loop free while it runs
    return await asyncio.to_thread(searcher.search, query)


async def fetch_results(query: str, searcher: Optional[SearchClientPort] = None) -> Optional[ProfileLookupResult]:
    """Look up ``query`` (usually a LinkedIn profile URL) through the search proxy.

    Returns None when the request or JSON decoding fails; the failure is
    logged, never raised. "No organic results" still returns a record holding
    the input as ``linkedin_url``.
    """
    try:
        payload = await _fetch_payload(query, searcher)
    except Exception as e:
        logging.exception(
            f"Error fetching data for {query}: {e}",
            extra={"step": "fetch_results", "status": "error", "error": type(e).__name__},
        )
        return None
    return extract_profile(query, payload)


async def lookup_profile(query: str, searcher: Optional[SearchClientPort] = None) -> LookupOutcome:
    """Same lookup as fetch_results, with found / empty / failed kept apart."""
    try:
        payload = await _fetch_payload(query, searcher)
    except Exception as e:
        logging.error(
            f"Profile lookup failed for {query}: {e}",
            extra={"step": "lookup_profile", "status": "error", "error": type(e).__name__},
        )
        return LookupOutcome(status="failed", error=str(e))

    result = extract_profile(query, payload)
    status = "found" if SerpResponse.from_payload(payload).organic_results else "empty"
    logging.info(
        f"Profile lookup for {query}: {status}",
        extra={"step": "lookup_profile", "status": status},
    )
    return LookupOutcome(status=status, result=result)
