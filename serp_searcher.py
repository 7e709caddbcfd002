"""
Search proxy integration for LinkedIn profile lookups.
"""
import logging
import time
from typing import Any, Dict, Optional

import requests

from config.settings import get_settings, Settings
from utils.search_logger import log_call


class SerpSearchError(Exception):
    """Raised when the search proxy call or its JSON decoding fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SerpSearcher:
    """Handles the single GET against the SERP proxy endpoint."""

    source_name = "serp_proxy"

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.search_url = self.settings.serp_search_url
        self.api_calls_made = 0

    def build_params(self, query: str) -> Dict[str, str]:
        """Query parameters for the proxy; requests handles the URL encoding."""
        return {'q': query}

    def search(self, query: str) -> Any:
        """Execute one proxy request and return the decoded JSON document."""
        logging.info(
            f"Making search call {self.api_calls_made + 1} for query: {query}",
            extra={"step": "serp_search", "provider": self.source_name},
        )
        t0 = time.time()
        try:
            response = requests.get(
                self.search_url,
                params=self.build_params(query),
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            # Covers transport failures and a malformed SERP_SEARCH_URL alike
            self._trace(query, t0, "error", error=str(e))
            raise SerpSearchError(f"Request error: {e}") from e

        self.api_calls_made += 1
        status_code = response.status_code
        if not response.ok:
            message = f"Search request failed with status {status_code}: {response.text[:200]}"
            self._trace(query, t0, "error", error=message, http_status=status_code)
            raise SerpSearchError(message, status_code=status_code)

        try:
            data = response.json()
        except ValueError as e:
            self._trace(query, t0, "error", error=str(e), http_status=status_code)
            raise SerpSearchError(f"Invalid JSON in search response: {e}", status_code=status_code) from e

        organic = data.get('organic_results') if isinstance(data, dict) else None
        result_count = len(organic) if isinstance(organic, list) else 0
        duration_ms = self._trace(query, t0, "ok", http_status=status_code, result_count=result_count)
        logging.info(
            f"Search completed. Organic results: {result_count}, API calls made: {self.api_calls_made}",
            extra={"step": "serp_search", "status": "ok", "provider": self.source_name, "duration_ms": duration_ms},
        )
        return data

    def _trace(self, query: str, t0: float, status: str, **fields: Any) -> int:
        duration_ms = int((time.time() - t0) * 1000)
        log_call(
            caller="serp_searcher.search",
            provider=self.source_name,
            operation="serp_search",
            query=query,
            duration_ms=duration_ms,
            status=status,
            **fields,
        )
        return duration_ms

    def get_api_usage(self) -> Dict:
        """Return API usage statistics."""
        return {
            'api_calls_made': self.api_calls_made,
        }
