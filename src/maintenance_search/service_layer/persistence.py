"""Fault-tolerant JSON collections on top of a key-value store.

Loading never raises: a failing store, undecodable JSON, or a payload that
does not validate is logged and read as the caller's fallback,
empty unless given. Writes that fail are logged and dropped so filtering
and search keep working.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import orjson
from pydantic import TypeAdapter, ValidationError

from maintenance_search.adapters.storage import AbstractKeyValueStore
from maintenance_search.observability.metrics import PERSISTENCE_ERRORS


logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_collection(
    store: AbstractKeyValueStore,
    key: str,
    adapter: TypeAdapter[list[T]],
    fallback: list[T] | None = None,
) -> list[T]:
    """Read and validate the collection under ``key``.

    An absent key reads as empty. A failed read or a malformed payload returns
    ``fallback`` (empty by default), so callers can keep what they last saw.
    """
    fallback = [] if fallback is None else fallback
    try:
        raw = store.get(key)
    except Exception as exc:
        logger.warning("Failed to read %s from store: %s", key, exc)
        PERSISTENCE_ERRORS.labels(key=key, action="read").inc()
        return fallback

    if raw is None:
        return []

    try:
        return adapter.validate_python(orjson.loads(raw))
    except (orjson.JSONDecodeError, ValidationError, TypeError) as exc:
        logger.warning("Discarding malformed %s payload: %s", key, exc)
        PERSISTENCE_ERRORS.labels(key=key, action="decode").inc()
        return fallback


def save_collection(store: AbstractKeyValueStore, key: str, payload: list[Any]) -> bool:
    """Serialize ``payload`` and write it; returns whether the write landed."""
    try:
        store.set(key, orjson.dumps(payload).decode("utf-8"))
    except Exception as exc:
        logger.error("Failed to write %s to store: %s", key, exc, exc_info=True)
        PERSISTENCE_ERRORS.labels(key=key, action="write").inc()
        return False
    return True
