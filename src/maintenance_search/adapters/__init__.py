"""Infrastructure adapters: persistence stores behind the key-value port."""

from maintenance_search.adapters.storage import (
    AbstractKeyValueStore,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)


__all__ = [
    "AbstractKeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
