"""Per-grid search session: the only surface the presentation layer calls.

A session owns its records, active FilterSet, debounced query, index caches
and persistence repositories. Nothing here is shared between sessions; two
grids on screen hold two sessions.

Data flow::

    records -> apply_filters(active conditions) -> filtered records
            -> filtered index (rebuilt when the filtered list changes)
            -> search / suggest
    records -> full index (rebuilt when the record list changes)
            -> alternatives, when a search finds nothing
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Sequence
import logging
import time
from uuid import uuid4

from maintenance_search.adapters.storage import AbstractKeyValueStore, InMemoryKeyValueStore
from maintenance_search.config import Settings
from maintenance_search.domain.model import (
    FilterCondition,
    FilterResult,
    Record,
    SavedFilter,
    SearchIndexEntry,
    SearchOutcome,
    ValidationResult,
)
from maintenance_search.observability.context import session_scope
from maintenance_search.observability.metrics import (
    INDEX_BUILDS,
    INDEX_ENTRIES,
    OPERATION_LATENCY,
    track_latency,
)
from maintenance_search.observability.tracing import create_span
from maintenance_search.search import scoring, suggestions
from maintenance_search.search.conditions import validate_condition
from maintenance_search.search.filters import apply_filters, filter_result
from maintenance_search.search.indexer import IndexCache, build_search_index
from maintenance_search.service_layer.history import SearchHistory
from maintenance_search.service_layer.saved_filters import SavedFilterRepository
from maintenance_search.services.debounce import DebounceCoordinator


logger = logging.getLogger(__name__)


class SearchSession:
    """Filter, search and suggestion state for one data grid."""

    def __init__(
        self,
        records: Iterable[Record] = (),
        *,
        settings: Settings | None = None,
        store: AbstractKeyValueStore | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
        on_results: Callable[[SearchOutcome], None] | None = None,
        session_id: str | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session_id = session_id or uuid4().hex[:12]
        self.field_map = self.settings.field_map()
        self.on_results = on_results

        self._records: list[Record] = list(records)
        self._conditions: list[FilterCondition] = []
        self._filtered: list[Record] | None = None
        self._raw_query = ""
        self._query = ""

        self._full_index = IndexCache(self._build_full_index)
        self._filtered_index = IndexCache(self._build_filtered_index)
        self._debounce = DebounceCoordinator(self._commit_query, self.settings.debounce_seconds, loop=loop)

        store = store or InMemoryKeyValueStore()
        self.saved_filters = SavedFilterRepository(store, self.settings.saved_filters_key)
        self.history = SearchHistory(
            store,
            self.settings.search_history_key,
            max_items=self.settings.max_history_items,
            min_length=self.settings.min_query_length,
        )

    # ------------------------------------------------------------------
    # Records and filters
    # ------------------------------------------------------------------

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    @property
    def conditions(self) -> list[FilterCondition]:
        return list(self._conditions)

    @property
    def active_conditions(self) -> list[FilterCondition]:
        """Conditions that pass validation; only these are evaluated."""
        return [condition for condition in self._conditions if validate_condition(condition).is_valid]

    def set_records(self, records: Iterable[Record]) -> None:
        self._records = list(records)
        self._filtered = None

    def set_filters(self, conditions: Iterable[FilterCondition]) -> None:
        self._conditions = list(conditions)
        self._filtered = None

    def add_filter(self, condition: FilterCondition) -> None:
        self.set_filters([*self._conditions, condition])

    def update_filter(self, index: int, condition: FilterCondition) -> None:
        conditions = list(self._conditions)
        conditions[index] = condition
        self.set_filters(conditions)

    def remove_filter(self, index: int) -> None:
        conditions = list(self._conditions)
        del conditions[index]
        self.set_filters(conditions)

    def clear_filters(self) -> None:
        self.set_filters([])

    def validate_filters(self) -> list[ValidationResult]:
        """One validation result per condition, in FilterSet order."""
        return [validate_condition(condition) for condition in self._conditions]

    def apply_filters(self) -> list[Record]:
        return list(self._filtered_records())

    def filter_result(self) -> FilterResult:
        return filter_result(self._records, self._filtered_records())

    def _filtered_records(self) -> list[Record]:
        if self._filtered is None:
            active = self.active_conditions
            with (
                session_scope(self.session_id),
                create_span("filters.apply", attributes={"filters.count": len(active)}),
                track_latency(OPERATION_LATENCY, operation="filter"),
            ):
                self._filtered = apply_filters(self._records, active)
                logger.debug(
                    "Filtered %d of %d records with %d conditions",
                    len(self._filtered),
                    len(self._records),
                    len(active),
                )
        return self._filtered

    # ------------------------------------------------------------------
    # Indexes
    # ------------------------------------------------------------------

    def _build_full_index(self, records: Sequence[Record]) -> list[SearchIndexEntry]:
        entries = build_search_index(records, self.field_map)
        INDEX_BUILDS.labels(scope="full").inc()
        INDEX_ENTRIES.labels(scope="full").set(len(entries))
        return entries

    def _build_filtered_index(self, records: Sequence[Record]) -> list[SearchIndexEntry]:
        wanted = {id(record) for record in records}
        entries = [entry for entry in self.full_index() if id(entry.record) in wanted]
        INDEX_BUILDS.labels(scope="filtered").inc()
        INDEX_ENTRIES.labels(scope="filtered").set(len(entries))
        return entries

    def full_index(self) -> list[SearchIndexEntry]:
        return self._full_index.get(self._records)

    def filtered_index(self) -> list[SearchIndexEntry]:
        return self._filtered_index.get(self._filtered_records())

    # ------------------------------------------------------------------
    # Query input
    # ------------------------------------------------------------------

    @property
    def raw_query(self) -> str:
        return self._raw_query

    @property
    def query(self) -> str:
        """The debounced query that search, suggest and alternatives use."""
        return self._query

    @property
    def is_searching(self) -> bool:
        return self._debounce.pending

    def set_query(self, raw: str) -> None:
        """Record a keystroke; the query is committed after the idle delay."""
        self._raw_query = raw
        if raw == self._query:
            self._debounce.cancel()
            return
        self._debounce.invoke(raw)

    def flush_query(self) -> bool:
        """Commit a pending query immediately."""
        return self._debounce.flush()

    def close(self) -> None:
        self._debounce.cancel()

    def _commit_query(self, term: str) -> None:
        self._query = term
        if self.on_results is not None:
            self.on_results(self.search())

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _searchable(self) -> bool:
        return scoring.is_searchable(self._query, self.settings.min_query_length)

    def search(self) -> SearchOutcome:
        started = time.perf_counter()
        filtered = self._filtered_records()
        with (
            session_scope(self.session_id),
            create_span("search.query", attributes={"search.query_length": len(self._query)}),
            track_latency(OPERATION_LATENCY, operation="search"),
        ):
            if self._searchable():
                items = scoring.search(
                    self.filtered_index(),
                    self._query,
                    self.settings.max_results,
                    min_query_length=self.settings.min_query_length,
                )
            else:
                items = list(filtered)

        elapsed_ms = (time.perf_counter() - started) * 1000
        return SearchOutcome(
            items=items,
            total_count=len(filtered),
            search_time_ms=elapsed_ms,
            has_results=bool(items),
        )

    def suggest(self) -> list[str]:
        if not self._searchable():
            return []
        with track_latency(OPERATION_LATENCY, operation="suggest"):
            return suggestions.suggest(
                self.filtered_index(),
                self._query,
                self.settings.max_suggestions,
                field_map=self.field_map,
                min_query_length=self.settings.min_query_length,
            )

    def alternatives(self, outcome: SearchOutcome | None = None) -> list[str]:
        """Fallback suggestions, only when the current query finds nothing."""
        if not self._searchable():
            return []
        outcome = outcome or self.search()
        if outcome.has_results:
            return []
        with track_latency(OPERATION_LATENCY, operation="alternatives"):
            return suggestions.alternatives(
                self.full_index(),
                self._query,
                self.settings.max_alternatives,
                field_map=self.field_map,
                max_distance=self.settings.max_edit_distance,
                hint_limit=self.settings.category_hint_limit,
                min_query_length=self.settings.min_query_length,
            )

    # ------------------------------------------------------------------
    # Saved filters and history
    # ------------------------------------------------------------------

    def save_filter(
        self,
        name: str,
        description: str | None = None,
        conditions: Sequence[FilterCondition] | None = None,
    ) -> SavedFilter:
        return self.saved_filters.save(name, self._conditions if conditions is None else conditions, description)

    def load_saved_filter(self, filter_id: str) -> bool:
        """Make a saved filter the active FilterSet and stamp ``last_used``."""
        saved = self.saved_filters.get(filter_id)
        if saved is None:
            logger.warning("Saved filter %s not found", filter_id)
            return False
        self.set_filters(saved.conditions)
        self.saved_filters.mark_used(filter_id)
        return True

    def add_to_history(self, term: str | None = None) -> bool:
        return self.history.add(self._query if term is None else term)

    def clear_history(self) -> None:
        self.history.clear()
