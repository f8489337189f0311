"""Weighted relevance scoring over a prebuilt search index.

Signals per entry (``q`` is the lowercased, trimmed query):

===========================================  =======  ===========
signal                                        points   match count
===========================================  =======  ===========
label contains ``q``                          +100     +1
searchable text contains ``q``                +50      +1
each query word found inside some keyword     +10      +1
hierarchy path contains ``q``                 +30
any attribute key or value contains ``q``     +20
===========================================  =======  ===========

Zero-score entries are dropped; the rest sort by score, then match count,
both descending, keeping index order for full ties.
"""

from __future__ import annotations

from collections.abc import Sequence

from maintenance_search.domain.model import Record, ScoredMatch, SearchIndexEntry


LABEL_WEIGHT = 100
TEXT_WEIGHT = 50
KEYWORD_WEIGHT = 10
PATH_WEIGHT = 30
ATTRIBUTE_WEIGHT = 20

MIN_QUERY_LENGTH = 2
DEFAULT_MAX_RESULTS = 1000


def normalize_query(query: str) -> str:
    return query.lower().strip()


def is_searchable(query: str | None, min_length: int = MIN_QUERY_LENGTH) -> bool:
    """Whether ``query`` is long enough to run scoring at all."""
    return bool(query) and len(query) >= min_length


def score_entry(entry: SearchIndexEntry, normalized: str, words: Sequence[str]) -> ScoredMatch:
    score = 0
    match_count = 0

    if normalized in entry.label:
        score += LABEL_WEIGHT
        match_count += 1

    if normalized in entry.searchable_text:
        score += TEXT_WEIGHT
        match_count += 1

    for word in words:
        if any(word in keyword for keyword in entry.keywords):
            score += KEYWORD_WEIGHT
            match_count += 1

    if entry.path is not None and normalized in entry.path:
        score += PATH_WEIGHT

    if any(normalized in key or normalized in value for key, value in entry.attributes):
        score += ATTRIBUTE_WEIGHT

    return ScoredMatch(record=entry.record, score=score, match_count=match_count)


def rank(index: Sequence[SearchIndexEntry], query: str) -> list[ScoredMatch]:
    """Score every entry and return the non-zero matches in rank order."""
    normalized = normalize_query(query)
    words = normalized.split()
    matches = [match for entry in index if (match := score_entry(entry, normalized, words)).score > 0]
    matches.sort(key=lambda match: (-match.score, -match.match_count))
    return matches


def search(
    index: Sequence[SearchIndexEntry],
    query: str,
    max_results: int = DEFAULT_MAX_RESULTS,
    *,
    min_query_length: int = MIN_QUERY_LENGTH,
) -> list[Record]:
    """Return indexed records ordered by descending relevance.

    Queries shorter than ``min_query_length`` skip scoring and return every
    record in index order.
    """
    if not is_searchable(query, min_query_length):
        return [entry.record for entry in index]
    return [match.record for match in rank(index, query)[:max_results]]
