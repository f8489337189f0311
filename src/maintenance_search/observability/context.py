"""Context propagation so log lines carry the grid session and active span."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from uuid import uuid4


log_context: ContextVar[dict | None] = ContextVar("log_context", default=None)


def generate_trace_id() -> str:
    """Generate a 32-char hex trace ID."""
    return uuid4().hex


def generate_span_id() -> str:
    """Generate a 16-char hex span ID."""
    return uuid4().hex[:16]


def get_log_context() -> dict:
    """Get current context, creating trace/span ids on first use."""
    ctx = log_context.get()
    if ctx is None or not ctx.get("trace_id"):
        ctx = {"span_id": generate_span_id(), **(ctx or {}), "trace_id": generate_trace_id()}
        log_context.set(ctx)
    return ctx


def update_span_id(span_id: str) -> None:
    """Update span_id while preserving the rest of the context."""
    ctx = log_context.get() or {}
    log_context.set({**ctx, "span_id": span_id})


@contextmanager
def session_scope(session_id: str) -> Iterator[None]:
    """Tag everything logged inside the block with ``session_id``."""
    ctx = log_context.get() or {}
    token = log_context.set({**ctx, "session": session_id})
    try:
        yield
    finally:
        log_context.reset(token)
