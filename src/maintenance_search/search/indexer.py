"""Search index construction.

Each record becomes exactly one :class:`SearchIndexEntry` holding a lowercased
text blob and its deduplicated keywords. Building is a pure function of the
records; :class:`IndexCache` memoizes it on the identity of the record
sequence so per-keystroke searches reuse the same entries.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging

from maintenance_search.domain.model import Record, SearchIndexEntry
from maintenance_search.search.fields import RecordFieldMap


logger = logging.getLogger(__name__)

DEFAULT_FIELD_MAP = RecordFieldMap()

IndexBuilder = Callable[[Sequence[Record]], list[SearchIndexEntry]]


def extract_keywords(text: str) -> tuple[str, ...]:
    """Split on whitespace, keep tokens longer than one character, dedupe in order."""
    return tuple(dict.fromkeys(word for word in text.split() if len(word) > 1))


def build_entry(record: Record, field_map: RecordFieldMap = DEFAULT_FIELD_MAP) -> SearchIndexEntry:
    label = field_map.label_of(record)
    path = field_map.path_of(record)
    attributes = field_map.attributes_of(record)

    parts = [
        label,
        path or "",
        field_map.code_of(record),
        field_map.category_of(record),
        *(f"{key} {value}" for key, value in attributes),
    ]
    searchable_text = " ".join(parts).lower()

    return SearchIndexEntry(
        id=record.get("id"),
        searchable_text=searchable_text,
        keywords=extract_keywords(searchable_text),
        record=record,
        label=label.lower(),
        path=path.lower() if path is not None else None,
        attributes=tuple((key.lower(), value.lower()) for key, value in attributes),
    )


def build_search_index(
    records: Sequence[Record],
    field_map: RecordFieldMap = DEFAULT_FIELD_MAP,
) -> list[SearchIndexEntry]:
    """Build one index entry per record, in record order."""
    return [build_entry(record, field_map) for record in records]


def collect_keywords(index: Sequence[SearchIndexEntry]) -> list[str]:
    """All distinct keywords across ``index`` in first-seen order."""
    return list(dict.fromkeys(keyword for entry in index for keyword in entry.keywords))


class IndexCache:
    """Rebuild an index only when the source sequence object changes.

    Identity (``is``), not equality, decides staleness: callers hand in a new
    sequence whenever the record set changes and reuse the same one otherwise.
    """

    def __init__(self, builder: IndexBuilder | None = None) -> None:
        self._builder: IndexBuilder = builder or build_search_index
        self._source: Sequence[Record] | None = None
        self._entries: list[SearchIndexEntry] = []
        self.builds = 0

    def get(self, records: Sequence[Record]) -> list[SearchIndexEntry]:
        if self._source is not records:
            self._entries = self._builder(records)
            self._source = records
            self.builds += 1
            logger.debug("Rebuilt search index with %d entries", len(self._entries))
        return self._entries

    def invalidate(self) -> None:
        self._source = None
        self._entries = []
