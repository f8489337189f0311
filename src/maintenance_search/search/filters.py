"""FilterSet evaluation with AND/OR grouping.

Conditions are split into groups scanning left to right; a new group starts
*after* every condition whose ``logical_operator`` is OR. Conditions inside a
group are AND-ed and the groups are OR-ed:

    [c1, c2(OR), c3, c4]  ->  (c1 and c2) or (c3 and c4)

This is not left-associative evaluation and must not be simplified to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from maintenance_search.domain.model import FilterCondition, FilterResult, Record
from maintenance_search.search.conditions import evaluate_condition


def group_conditions(conditions: Sequence[FilterCondition]) -> list[list[FilterCondition]]:
    """Partition ``conditions`` into AND-groups."""
    if not conditions:
        return []

    groups: list[list[FilterCondition]] = []
    current = [conditions[0]]
    for previous, condition in zip(conditions, conditions[1:]):
        if previous.joins_with_or:
            groups.append(current)
            current = [condition]
        else:
            current.append(condition)
    groups.append(current)
    return groups


def matches_filter_set(record: Record, conditions: Sequence[FilterCondition]) -> bool:
    """Return whether ``record`` passes at least one AND-group."""
    if not conditions:
        return True
    if len(conditions) == 1:
        return evaluate_condition(record, conditions[0])
    return any(all(evaluate_condition(record, c) for c in group) for group in group_conditions(conditions))


def apply_filters(records: Iterable[Record], conditions: Sequence[FilterCondition]) -> list[Record]:
    """Return the records passing ``conditions``, in input order."""
    if not conditions:
        return list(records)
    if len(conditions) == 1:
        only = conditions[0]
        return [record for record in records if evaluate_condition(record, only)]

    groups = group_conditions(conditions)
    return [
        record
        for record in records
        if any(all(evaluate_condition(record, c) for c in group) for group in groups)
    ]


def filter_result(total: Sequence[Record], filtered: Sequence[Record]) -> FilterResult:
    return FilterResult(total_count=len(total), filtered_count=len(filtered))
