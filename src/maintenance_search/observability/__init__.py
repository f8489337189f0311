"""Observability module: structured logging, Prometheus/OTel metrics, tracing."""

from maintenance_search.observability.context import get_log_context, log_context, session_scope
from maintenance_search.observability.logging import JsonFormatter, configure_from_settings, configure_logging
from maintenance_search.observability.metrics import (
    INDEX_BUILDS,
    INDEX_ENTRIES,
    OPERATION_LATENCY,
    PERSISTENCE_ERRORS,
    get_metrics,
    get_metrics_content_type,
    init_metrics,
    track_latency,
)
from maintenance_search.observability.tracing import create_span, get_tracer


__all__ = [
    "INDEX_BUILDS",
    "INDEX_ENTRIES",
    "OPERATION_LATENCY",
    "PERSISTENCE_ERRORS",
    "JsonFormatter",
    "configure_from_settings",
    "configure_logging",
    "create_span",
    "get_log_context",
    "get_metrics",
    "get_metrics_content_type",
    "get_tracer",
    "init_metrics",
    "log_context",
    "session_scope",
    "track_latency",
]
