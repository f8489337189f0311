"""Record filtering and fuzzy search for the maintenance data grid."""

from maintenance_search.domain.model import (
    FilterCondition,
    FilterOperator,
    LogicalOperator,
    SavedFilter,
    SearchOutcome,
    ValidationResult,
)
from maintenance_search.search import (
    alternatives,
    apply_filters,
    build_search_index,
    evaluate_condition,
    search,
    suggest,
    validate_condition,
)
from maintenance_search.service_layer.search_session import SearchSession


__version__ = "0.1.0"

__all__ = [
    "FilterCondition",
    "FilterOperator",
    "LogicalOperator",
    "SavedFilter",
    "SearchOutcome",
    "SearchSession",
    "ValidationResult",
    "alternatives",
    "apply_filters",
    "build_search_index",
    "evaluate_condition",
    "search",
    "suggest",
    "validate_condition",
]
