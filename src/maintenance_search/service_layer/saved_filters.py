"""Saved filter bookkeeping.

Saved filters are created on explicit save, stamped with ``last_used`` when
loaded or edited, and removed on explicit delete. The collection is re-read
from the store before every read and change and written back whole after
every change, so repositories sharing a store see each other's edits.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
import logging

from pydantic import TypeAdapter

from maintenance_search.adapters.storage import AbstractKeyValueStore
from maintenance_search.domain.model import FilterCondition, SavedFilter, generate_filter_id
from maintenance_search.service_layer.persistence import load_collection, save_collection


logger = logging.getLogger(__name__)

_SAVED_FILTERS = TypeAdapter(list[SavedFilter])

COPY_SUFFIX = " (copy)"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SavedFilterRepository:
    """CRUD over the saved-filter collection stored under one key."""

    def __init__(
        self,
        store: AbstractKeyValueStore,
        key: str = "hoshitori_saved_filters",
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._key = key
        self._clock = clock
        self._filters: list[SavedFilter] = []
        self._refresh()
        logger.debug("Loaded %d saved filters", len(self._filters))

    def list_all(self) -> list[SavedFilter]:
        self._refresh()
        return list(self._filters)

    def get(self, filter_id: str) -> SavedFilter | None:
        self._refresh()
        return next((saved for saved in self._filters if saved.id == filter_id), None)

    def save(
        self,
        name: str,
        conditions: Sequence[FilterCondition],
        description: str | None = None,
    ) -> SavedFilter:
        saved = SavedFilter(
            id=generate_filter_id(),
            name=name,
            description=description,
            conditions=list(conditions),
            created_at=self._clock(),
        )
        self._refresh()
        self._filters.append(saved)
        self._persist()
        logger.info("Saved filter %s (%d conditions)", saved.id, len(saved.conditions))
        return saved

    def update(
        self,
        filter_id: str,
        name: str,
        description: str | None,
        conditions: Sequence[FilterCondition],
    ) -> SavedFilter | None:
        return self._replace(
            filter_id,
            name=name,
            description=description,
            conditions=list(conditions),
            last_used=self._clock(),
        )

    def duplicate(self, filter_id: str) -> SavedFilter | None:
        original = self.get(filter_id)
        if original is None:
            return None
        copy = SavedFilter(
            id=generate_filter_id(),
            name=f"{original.name}{COPY_SUFFIX}",
            description=original.description,
            conditions=list(original.conditions),
            created_at=self._clock(),
        )
        self._filters.append(copy)
        self._persist()
        return copy

    def mark_used(self, filter_id: str) -> SavedFilter | None:
        return self._replace(filter_id, last_used=self._clock())

    def delete(self, filter_id: str) -> bool:
        self._refresh()
        remaining = [saved for saved in self._filters if saved.id != filter_id]
        if len(remaining) == len(self._filters):
            return False
        self._filters = remaining
        self._persist()
        return True

    def _replace(self, filter_id: str, **changes: object) -> SavedFilter | None:
        self._refresh()
        for position, saved in enumerate(self._filters):
            if saved.id == filter_id:
                updated = saved.model_copy(update=changes)
                self._filters[position] = updated
                self._persist()
                return updated
        return None

    def _refresh(self) -> None:
        self._filters = load_collection(self._store, self._key, _SAVED_FILTERS, fallback=self._filters)

    def _persist(self) -> None:
        payload = [saved.model_dump(mode="json", by_alias=True) for saved in self._filters]
        save_collection(self._store, self._key, payload)
