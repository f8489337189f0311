"""Unit tests for domain model.

Value objects are checked in isolation: construction, coercion, JSON shape
and immutability.
"""

from datetime import datetime, timezone
import re

from pydantic import ValidationError
import pytest

from maintenance_search.domain import (
    FilterCondition,
    FilterOperator,
    LogicalOperator,
    SavedFilter,
    ValidationResult,
)
from maintenance_search.domain.model import generate_filter_id


pytestmark = pytest.mark.unit


class TestFilterOperator:
    """Test the operator enum."""

    def test_wire_names(self):
        """Operators serialize under their camelCase wire names."""
        assert [op.value for op in FilterOperator] == [
            "equals",
            "contains",
            "startsWith",
            "endsWith",
            "greaterThan",
            "lessThan",
            "between",
            "in",
            "notIn",
            "isEmpty",
            "isNotEmpty",
        ]

    def test_value_requirements(self):
        assert not FilterOperator.IS_EMPTY.requires_value
        assert not FilterOperator.IS_NOT_EMPTY.requires_value
        assert FilterOperator.EQUALS.requires_value
        assert {op for op in FilterOperator if op.requires_list} == {
            FilterOperator.BETWEEN,
            FilterOperator.IN,
            FilterOperator.NOT_IN,
        }


class TestFilterCondition:
    """Test FilterCondition value object."""

    def test_defaults(self):
        condition = FilterCondition()
        assert condition.id.startswith("filter_")
        assert condition.field == ""
        assert condition.operator is FilterOperator.CONTAINS
        assert condition.value == ""
        assert condition.logical_operator is None
        assert not condition.joins_with_or

    def test_known_operator_strings_become_enum(self):
        condition = FilterCondition(field="task", operator="startsWith", value="P")
        assert condition.operator is FilterOperator.STARTS_WITH

    def test_unknown_operator_is_kept(self):
        condition = FilterCondition(field="task", operator="regex", value="P.*")
        assert condition.operator == "regex"
        assert not isinstance(condition.operator, FilterOperator)

    def test_accepts_camel_case_payload(self):
        condition = FilterCondition.model_validate(
            {"id": "c1", "field": "cycle", "operator": "in", "value": ["月次", "年次"], "logicalOperator": "OR"}
        )
        assert condition.logical_operator is LogicalOperator.OR
        assert condition.joins_with_or
        assert condition.value == ["月次", "年次"]

    @pytest.mark.parametrize("value", ["text", 3, 2.5, True, None, [1, 2], ["a", "b", "c"]])
    def test_accepts_condition_values(self, value):
        assert FilterCondition(field="f", operator="equals", value=value).value == value

    def test_rejects_nested_values(self):
        with pytest.raises(ValidationError):
            FilterCondition(field="f", operator="in", value=[{"a": 1}])

    def test_rejects_unknown_logical_operator(self):
        with pytest.raises(ValidationError):
            FilterCondition(field="f", logical_operator="XOR")

    def test_is_immutable(self):
        condition = FilterCondition(field="task")
        with pytest.raises(ValidationError):
            condition.field = "cycle"

    @pytest.mark.parametrize("operator", list(FilterOperator))
    def test_json_round_trip(self, operator):
        """Every operator survives a trip through its JSON form."""
        condition = FilterCondition(
            id="c1",
            field="cost",
            operator=operator,
            value=[1, 2] if operator.requires_list else "x",
            logical_operator=LogicalOperator.AND,
        )
        payload = condition.to_json()

        assert payload["operator"] == operator.value
        assert payload["logicalOperator"] == "AND"
        assert FilterCondition.model_validate(payload) == condition


class TestSavedFilter:
    """Test SavedFilter value object."""

    def test_serializes_dates_as_iso_strings(self):
        saved = SavedFilter(
            id="s1",
            name="Monthly",
            created_at=datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc),
            conditions=[FilterCondition(id="c1", field="cycle", operator="equals", value="月次")],
        )
        payload = saved.model_dump(mode="json", by_alias=True)

        assert payload["createdAt"] == "2024-05-01T08:30:00Z"
        assert payload["lastUsed"] is None
        assert payload["conditions"][0]["operator"] == "equals"

    def test_parses_iso_strings(self):
        saved = SavedFilter.model_validate(
            {"id": "s1", "name": "Monthly", "conditions": [], "createdAt": "2024-05-01T08:30:00.000Z"}
        )
        assert saved.created_at == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            SavedFilter.model_validate({"id": "s1", "conditions": []})


class TestHelpers:
    def test_generate_filter_id_format(self):
        assert re.fullmatch(r"filter_1700000000000_[0-9a-z]{9}", generate_filter_id(1_700_000_000))

    def test_validation_result(self):
        assert ValidationResult.ok() == ValidationResult(is_valid=True)
        failed = ValidationResult.fail("Select a field")
        assert failed.is_valid is False
        assert failed.error == "Select a field"
