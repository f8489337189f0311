"""
Filter evaluation and search engine package.

This package provides the pure, synchronous parts of the engine:
- fields: dotted field-path resolution and the record field map
- conditions: single-condition evaluation and validation
- filters: AND/OR grouped FilterSet evaluation
- indexer: per-record searchable text and keywords, identity-keyed cache
- scoring: weighted relevance ranking
- suggestions: completions and edit-distance alternatives
- fuzzy: Levenshtein distance
- highlight: query-term markup
"""

from maintenance_search.search.conditions import (
    evaluate_condition,
    new_condition,
    summarize_conditions,
    validate_condition,
    validate_conditions,
)
from maintenance_search.search.fields import RecordFieldMap, resolve_field
from maintenance_search.search.filters import apply_filters, group_conditions, matches_filter_set
from maintenance_search.search.fuzzy import levenshtein_distance
from maintenance_search.search.highlight import highlight_terms
from maintenance_search.search.indexer import IndexCache, build_search_index
from maintenance_search.search.scoring import rank, search
from maintenance_search.search.suggestions import alternatives, suggest


__all__ = [
    "IndexCache",
    "RecordFieldMap",
    "alternatives",
    "apply_filters",
    "build_search_index",
    "evaluate_condition",
    "group_conditions",
    "highlight_terms",
    "levenshtein_distance",
    "matches_filter_set",
    "new_condition",
    "rank",
    "resolve_field",
    "search",
    "suggest",
    "summarize_conditions",
    "validate_condition",
    "validate_conditions",
]
