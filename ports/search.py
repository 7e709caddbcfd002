from __future__ import annotations

from typing import Any, Protocol


class SearchClientPort(Protocol):
    source_name: str

    def search(self, query: str) -> Any:
        ...
