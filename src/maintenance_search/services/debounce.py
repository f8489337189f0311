"""Trailing debounce on the asyncio event loop.

Only the last ``invoke`` of a burst runs, ``delay`` seconds after the burst
goes quiet. Earlier calls are never started, not merely discarded. The only
asynchronous state is the pending :class:`asyncio.TimerHandle`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging
from typing import Any


logger = logging.getLogger(__name__)


class DebounceCoordinator:
    """Hold the latest callback and arguments plus one cancellable timer.

    The callback is looked up when the timer fires, so swapping it with
    :meth:`set_callback` never leaves a stale closure scheduled.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        delay: float,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._callback = callback
        self._delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self.superseded = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def set_callback(self, callback: Callable[..., Any]) -> None:
        self._callback = callback

    def invoke(self, *args: Any, **kwargs: Any) -> None:
        """Schedule the callback with these arguments, replacing any pending call."""
        loop = self._loop or asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            self.superseded += 1
        self._args = args
        self._kwargs = kwargs
        self._handle = loop.call_later(self._delay, self._fire)

    def cancel(self) -> bool:
        """Drop the pending call. Returns whether one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._clear()
        return True

    def flush(self) -> bool:
        """Run the pending call now. Returns whether one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def _clear(self) -> None:
        self._handle = None
        self._args = ()
        self._kwargs = {}

    def _fire(self) -> None:
        args, kwargs = self._args, self._kwargs
        self._clear()
        try:
            self._callback(*args, **kwargs)
        except Exception:
            logger.exception("Debounced callback %r failed", self._callback)
