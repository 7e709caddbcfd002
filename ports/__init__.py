from .search import SearchClientPort

__all__ = [
    "SearchClientPort",
]
