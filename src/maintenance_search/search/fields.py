"""Field-path resolution against schemaless records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from maintenance_search.domain.model import Record


def _step(container: Any, name: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(name)
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes, bytearray)):
        # list indexes are ASCII decimal only
        if name.isascii() and name.isdecimal():
            index = int(name)
            return container[index] if index < len(container) else None
        return None
    return getattr(container, name, None)


def _is_indexable(value: Any) -> bool:
    if value is None or isinstance(value, (str, bytes, bytearray, bool, int, float)):
        return False
    return isinstance(value, (Mapping, Sequence)) or hasattr(value, "__dict__")


def resolve_field(record: Any, path: str) -> Any:
    """Resolve a dot-separated ``path`` against ``record``.

    Resolution walks left to right and stops with ``None`` as soon as an
    intermediate value is not a mapping, list, or attribute-bearing object.
    Missing keys are not errors.

    Examples:
        >>> resolve_field({"a": {"b": 1}}, "a.b")
        1
        >>> resolve_field({"a": "text"}, "a.b") is None
        True
    """
    value: Any = record
    for name in path.split("."):
        if not _is_indexable(value):
            return None
        value = _step(value, name)
    return value


def _text(value: Any) -> str:
    if value is None or value == "" or value is False:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True, slots=True)
class RecordFieldMap:
    """Names of the record fields the search index reads.

    Defaults match the maintenance grid rows: ``task`` label, ``hierarchyPath``
    breadcrumb joined by ``" > "``, ``bomCode``, ``cycle`` and a
    ``specifications`` list of ``{key, value}`` attribute pairs. Every name may
    itself be a dotted path.
    """

    label: str = "task"
    path: str = "hierarchyPath"
    code: str = "bomCode"
    category: str = "cycle"
    attributes: str = "specifications"
    path_separator: str = " > "

    def label_of(self, record: Record) -> str:
        return _text(resolve_field(record, self.label))

    def path_of(self, record: Record) -> str | None:
        value = resolve_field(record, self.path)
        if value is None:
            return None
        return _text(value)

    def path_segments(self, record: Record) -> list[str]:
        path = self.path_of(record)
        if path is None:
            return []
        return path.split(self.path_separator)

    def code_of(self, record: Record) -> str:
        return _text(resolve_field(record, self.code))

    def category_of(self, record: Record) -> str:
        return _text(resolve_field(record, self.category))

    def attributes_of(self, record: Record) -> list[tuple[str, str]]:
        """Return ``(key, value)`` attribute pairs; malformed items are skipped."""
        raw = resolve_field(record, self.attributes)
        if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes, bytearray)):
            return []
        pairs: list[tuple[str, str]] = []
        for item in raw:
            key = resolve_field(item, "key")
            value = resolve_field(item, "value")
            if key is None and value is None:
                continue
            pairs.append((_text(key), _text(value)))
        return pairs
