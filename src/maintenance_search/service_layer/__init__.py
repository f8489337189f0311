"""Service layer - session orchestration and persistence bookkeeping.

- search_session: per-grid facade over filtering, search and suggestions
- saved_filters: saved FilterSet repository
- history: recent query list
- persistence: fault-tolerant JSON collections over the key-value store
"""

from .history import SearchHistory
from .saved_filters import SavedFilterRepository
from .search_session import SearchSession


__all__ = [
    "SavedFilterRepository",
    "SearchHistory",
    "SearchSession",
]
