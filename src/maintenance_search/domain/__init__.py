"""Domain layer - value objects shared by the filter and search engines.

No infrastructure dependencies live here; persistence and scheduling are
injected by the service layer.
"""

from maintenance_search.domain.model import (
    ConditionValue,
    FilterCondition,
    FilterOperator,
    FilterResult,
    LogicalOperator,
    Record,
    SavedFilter,
    Scalar,
    ScoredMatch,
    SearchIndexEntry,
    SearchOutcome,
    ValidationResult,
    generate_filter_id,
)


__all__ = [
    "ConditionValue",
    "FilterCondition",
    "FilterOperator",
    "FilterResult",
    "LogicalOperator",
    "Record",
    "SavedFilter",
    "Scalar",
    "ScoredMatch",
    "SearchIndexEntry",
    "SearchOutcome",
    "ValidationResult",
    "generate_filter_id",
]
