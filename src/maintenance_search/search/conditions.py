"""Single-condition evaluation and validation.

Comparisons are loose in the way grid data needs: text operators compare
case-insensitively after converting both sides to text, numeric operators
convert both sides to float (anything unparsable becomes NaN, which never
compares true).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import math
from typing import Any

from maintenance_search.domain.model import (
    FilterCondition,
    FilterOperator,
    LogicalOperator,
    Record,
    ValidationResult,
)
from maintenance_search.search.fields import resolve_field


_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def to_text(value: Any) -> str:
    """Convert a field or condition value to comparable text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    return str(value)


def to_number(value: Any) -> float:
    """Convert a value to float, returning NaN when it is not numeric."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return _parse_number(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return 0.0
        if len(value) == 1:
            return to_number(to_text(value[0]) if value[0] is not None else "")
    return math.nan


def _parse_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        try:
            return float(int(text[2:], radix))
        except ValueError:
            return math.nan
    lowered = text.lower()
    if "_" in text or "inf" in lowered or "nan" in lowered:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _lower(value: Any) -> str:
    return to_text(value).lower()


def _in_list(field_value: Any, candidates: Sequence[Any]) -> bool:
    needle = _lower(field_value)
    return any(needle == _lower(candidate) for candidate in candidates)


def _between(field_value: Any, bounds: Any) -> bool:
    if not _is_list(bounds) or len(bounds) != 2:
        return False
    number = to_number(field_value)
    return to_number(bounds[0]) <= number <= to_number(bounds[1])


_Check = Callable[[Any, Any], bool]

_OPERATORS: dict[FilterOperator, _Check] = {
    FilterOperator.EQUALS: lambda field, value: _lower(field) == _lower(value),
    FilterOperator.CONTAINS: lambda field, value: _lower(value) in _lower(field),
    FilterOperator.STARTS_WITH: lambda field, value: _lower(field).startswith(_lower(value)),
    FilterOperator.ENDS_WITH: lambda field, value: _lower(field).endswith(_lower(value)),
    FilterOperator.GREATER_THAN: lambda field, value: to_number(field) > to_number(value),
    FilterOperator.LESS_THAN: lambda field, value: to_number(field) < to_number(value),
    FilterOperator.BETWEEN: _between,
    FilterOperator.IN: lambda field, value: _is_list(value) and _in_list(field, value),
    # TODO: confirm whether a non-list notIn should pass every record or be treated like in
    FilterOperator.NOT_IN: lambda field, value: not _is_list(value) or not _in_list(field, value),
    FilterOperator.IS_EMPTY: lambda field, _value: field == "",
    FilterOperator.IS_NOT_EMPTY: lambda field, _value: field != "",
}


def evaluate_condition(record: Record, condition: FilterCondition) -> bool:
    """Return whether ``record`` satisfies ``condition``.

    A missing or null field only satisfies ``isEmpty``. Operators outside the
    known set pass every record. Never raises for any condition shape.
    """
    field_value = resolve_field(record, condition.field)
    if field_value is None:
        return condition.operator is FilterOperator.IS_EMPTY

    check = _OPERATORS.get(condition.operator) if isinstance(condition.operator, FilterOperator) else None
    if check is None:
        return True
    return check(field_value, condition.value)


def validate_condition(condition: FilterCondition) -> ValidationResult:
    """Check that a condition's value fits its operator."""
    if not condition.field:
        return ValidationResult.fail("Select a field")

    operator = condition.operator
    if not operator:
        return ValidationResult.fail("Select an operator")

    value = condition.value
    known = isinstance(operator, FilterOperator)
    if known and operator.requires_list:
        if operator is FilterOperator.BETWEEN:
            if not _is_list(value) or len(value) != 2:
                return ValidationResult.fail("A range needs exactly two values")
        elif not _is_list(value):
            return ValidationResult.fail("Multiple selection needs a list of values")

    # unknown operators from newer clients still need a value
    if (not known or operator.requires_value) and value in (None, ""):
        return ValidationResult.fail("Enter a value")

    return ValidationResult.ok()


def validate_conditions(conditions: Iterable[FilterCondition]) -> ValidationResult:
    """Return the first failing validation result, or a valid one."""
    for condition in conditions:
        result = validate_condition(condition)
        if not result.is_valid:
            return result
    return ValidationResult.ok()


def new_condition() -> FilterCondition:
    """Blank condition for a freshly added filter row."""
    return FilterCondition(
        field="",
        operator=FilterOperator.CONTAINS,
        value="",
        logical_operator=LogicalOperator.AND,
    )


def summarize_conditions(conditions: Sequence[FilterCondition]) -> str:
    if not conditions:
        return "No conditions"
    if len(conditions) == 1:
        return "1 condition"
    return f"{len(conditions)} conditions"
