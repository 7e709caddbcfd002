from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.profile_lookup'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("SEARCH_TRACE", raising=False)
    monkeypatch.delenv("SERP_SEARCH_URL", raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeResponse:
    """Stand-in for requests.Response with just what the searcher reads."""

    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FakeSearcher:
    source_name = "fake"

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.queries: list[str] = []

    def search(self, query: str):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def serp_payload():
    """Trimmed capture of a real proxy response for a profile URL query."""
    return {
        "search_metadata": {"status": "Success", "total_time_taken": 0.89},
        "search_parameters": {
            "engine": "google",
            "q": "https://www.linkedin.com/in/vikas-singh-bril/",
        },
        "related_questions": [
            {
                "question": "What is Vikas Singh known for?",
                "title": "Dr Vikas Singh - IIPA : Indian Institute of Public Administration",
                "link": "https://www.iipa.org.in/cms/public/management/88",
            }
        ],
        "organic_results": [
            {
                "position": 1,
                "title": "Vikas Singh - Founder | AI Product Builder",
                "link": "https://ae.linkedin.com/in/vikas-singh-bril",
                "displayed_link": "8.2K+ followers",
                "snippet": "Vikas Singh. Founder | AI Product Builder | Shipped 80+ Agents/Apps ...",
                "source": "LinkedIn · Vikas Singh",
            },
            {
                "position": 2,
                "title": "Vikas Singh - Brilworks Software",
                "link": "https://www.brilworks.com/team/vikas-singh",
            },
        ],
    }


@pytest.fixture
def make_searcher():
    return FakeSearcher


@pytest.fixture
def make_response():
    return FakeResponse
