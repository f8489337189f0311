"""Most-recent-first search history.

The list is re-read from the store before every read and change, so
sessions sharing a store keep one history.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from maintenance_search.adapters.storage import AbstractKeyValueStore
from maintenance_search.service_layer.persistence import load_collection, save_collection


_TERMS = TypeAdapter(list[str])


class SearchHistory:
    """Bounded list of recent queries, newest first, without duplicates."""

    def __init__(
        self,
        store: AbstractKeyValueStore,
        key: str = "hoshitori_search_history",
        *,
        max_items: int = 10,
        min_length: int = 2,
    ) -> None:
        self._store = store
        self._key = key
        self.max_items = max_items
        self.min_length = min_length
        self._items: list[str] = []
        self._refresh()

    @property
    def items(self) -> list[str]:
        self._refresh()
        return list(self._items)

    def add(self, term: str) -> bool:
        """Move ``term`` to the front. Blank or too-short terms are ignored."""
        if not term.strip() or len(term) < self.min_length:
            return False
        self._refresh()
        self._items = [term, *(item for item in self._items if item != term)][: self.max_items]
        save_collection(self._store, self._key, self._items)
        return True

    def clear(self) -> None:
        self._items = []
        save_collection(self._store, self._key, self._items)

    def _refresh(self) -> None:
        self._items = load_collection(self._store, self._key, _TERMS, fallback=self._items)[: self.max_items]
