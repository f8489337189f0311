"""Search-as-you-type completions and "did you mean" alternatives."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from maintenance_search.domain.model import SearchIndexEntry
from maintenance_search.search.fields import RecordFieldMap
from maintenance_search.search.fuzzy import within_distance
from maintenance_search.search.indexer import DEFAULT_FIELD_MAP, collect_keywords
from maintenance_search.search.scoring import MIN_QUERY_LENGTH, is_searchable, normalize_query


DEFAULT_MAX_SUGGESTIONS = 8
DEFAULT_MAX_ALTERNATIVES = 5
DEFAULT_MAX_EDIT_DISTANCE = 2
DEFAULT_CATEGORY_HINTS = 3


def _candidates(
    index: Sequence[SearchIndexEntry],
    normalized: str,
    field_map: RecordFieldMap,
) -> Iterator[str]:
    for entry in index:
        if normalized in entry.label:
            yield field_map.label_of(entry.record)

        if entry.path is not None and normalized in entry.path:
            for segment in field_map.path_segments(entry.record):
                if normalized in segment.lower():
                    yield segment

        for key, value in field_map.attributes_of(entry.record):
            if normalized in key.lower():
                yield key
            if normalized in value.lower():
                yield value

        for keyword in entry.keywords:
            if normalized in keyword and keyword != normalized:
                yield keyword


def suggest(
    index: Sequence[SearchIndexEntry],
    query: str,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    *,
    field_map: RecordFieldMap = DEFAULT_FIELD_MAP,
    min_query_length: int = MIN_QUERY_LENGTH,
) -> list[str]:
    """Return distinct completions containing ``query``.

    Candidates that start with the query rank first, shorter strings first
    within each tier. The query itself is never suggested.
    """
    if not is_searchable(query, min_query_length):
        return []

    normalized = normalize_query(query)
    distinct = dict.fromkeys(_candidates(index, normalized, field_map))
    ranked = sorted(
        (candidate for candidate in distinct if candidate.lower() != normalized),
        key=lambda candidate: (not candidate.lower().startswith(normalized), len(candidate)),
    )
    return ranked[:max_suggestions]


def category_hints(
    index: Sequence[SearchIndexEntry],
    limit: int = DEFAULT_CATEGORY_HINTS,
    *,
    field_map: RecordFieldMap = DEFAULT_FIELD_MAP,
) -> list[str]:
    """First ``limit`` distinct hierarchy segments longer than two characters."""
    segments = dict.fromkeys(
        segment for entry in index for segment in field_map.path_segments(entry.record)
    )
    return [segment for segment in segments if len(segment) > 2][:limit]


def alternatives(
    index: Sequence[SearchIndexEntry],
    query: str,
    max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
    *,
    field_map: RecordFieldMap = DEFAULT_FIELD_MAP,
    max_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
    hint_limit: int = DEFAULT_CATEGORY_HINTS,
    min_query_length: int = MIN_QUERY_LENGTH,
) -> list[str]:
    """Typo-tolerant fallbacks for a query that matched nothing.

    Keywords longer than two characters within ``max_distance`` edits of the
    query are merged with a few hierarchy segments as category hints, then
    ordered shortest first.
    """
    if not is_searchable(query, min_query_length):
        return []

    normalized = normalize_query(query)
    vocabulary = [keyword for keyword in collect_keywords(index) if len(keyword) > 2]
    merged = dict.fromkeys(within_distance(normalized, vocabulary, max_distance))
    merged.update(dict.fromkeys(category_hints(index, hint_limit, field_map=field_map)))
    return sorted(merged, key=len)[:max_alternatives]
