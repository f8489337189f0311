"""Domain model for record filtering and search.

Value objects are immutable pydantic models (frozen=True). Conditions are
replaced wholesale, never mutated, so an evaluated FilterSet cannot change
under the evaluator.

JSON payloads use the camelCase names the grid persists (``logicalOperator``,
``createdAt``, ``lastUsed``); Python code uses snake_case attributes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
import random
import string
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


Record = Mapping[str, Any]

Scalar = str | int | float | bool
ConditionValue = Scalar | list[Scalar] | None

_ID_ALPHABET = string.digits + string.ascii_lowercase


class FilterOperator(str, Enum):
    """Closed set of condition operators."""

    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    BETWEEN = "between"
    IN = "in"
    NOT_IN = "notIn"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"

    @property
    def requires_value(self) -> bool:
        return self not in {FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY}

    @property
    def requires_list(self) -> bool:
        return self in {FilterOperator.BETWEEN, FilterOperator.IN, FilterOperator.NOT_IN}


class LogicalOperator(str, Enum):
    """How a condition joins the condition before it."""

    AND = "AND"
    OR = "OR"


def generate_filter_id(now: float | None = None) -> str:
    """Return an id of the form ``filter_<epoch ms>_<9 base36 chars>``."""
    millis = int((time.time() if now is None else now) * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"filter_{millis}_{suffix}"


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class FilterCondition(_CamelModel):
    """One field/operator/value test.

    ``operator`` holds a :class:`FilterOperator` for every known wire name. Other
    strings are kept as-is so stored conditions written by a newer client still
    load; the evaluator passes them through.
    """

    id: str = Field(default_factory=generate_filter_id)
    field: str = ""
    operator: FilterOperator | str = FilterOperator.CONTAINS
    value: ConditionValue = ""
    logical_operator: LogicalOperator | None = None

    @field_validator("operator", mode="before")
    @classmethod
    def _coerce_operator(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, FilterOperator):
            try:
                return FilterOperator(value)
            except ValueError:
                return value
        return value

    @property
    def joins_with_or(self) -> bool:
        return self.logical_operator is LogicalOperator.OR

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SavedFilter(_CamelModel):
    """A named FilterSet persisted by the saved-filter repository."""

    id: str = Field(default_factory=generate_filter_id)
    name: str
    conditions: list[FilterCondition] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_used: datetime | None = None
    description: str | None = None


class ValidationResult(BaseModel):
    """Outcome of validating a condition; errors are reported, never raised."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(is_valid=False, error=error)


@dataclass(frozen=True, slots=True)
class SearchIndexEntry:
    """Precomputed searchable form of one record.

    ``label``, ``path`` and ``attributes`` are the lowercased source fields the
    scorer and suggestion engines test against; ``path`` is ``None`` when the
    record has no hierarchy path at all.
    """

    id: Any
    searchable_text: str
    keywords: tuple[str, ...]
    record: Record
    label: str = ""
    path: str | None = None
    attributes: tuple[tuple[str, str], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ScoredMatch:
    record: Record
    score: int
    match_count: int


@dataclass(frozen=True, slots=True)
class FilterResult:
    total_count: int
    filtered_count: int


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Result of running the effective query against the filtered records."""

    items: list[Record]
    total_count: int
    search_time_ms: float
    has_results: bool
