"""Keyed debouncing on top of threading.Timer.

Scheduling a task under a key cancels whatever was pending under the same
key, so a burst of calls collapses into one run after the quiet interval.
"""

import logging
import threading
from typing import Callable

from table2katex.config import DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


class Debouncer:
    """Run the latest callable per key once no new call arrived for *wait* seconds."""

    def __init__(self, wait: float = DEBOUNCE_SECONDS):
        self.wait = wait
        self._timers: dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    def schedule(self, key: str, func: Callable, *args, **kwargs) -> None:
        """Schedule func(*args, **kwargs), superseding any pending call for *key*."""
        with self._lock:
            pending = self._timers.pop(key, None)
            if pending is not None:
                pending.cancel()
                logger.debug("Superseded pending call for %r", key)
            timer = threading.Timer(self.wait, self._fire, args=(key, func, args, kwargs))
            timer.daemon = True
            self._timers[key] = timer
            timer.start()

    def cancel(self, key: str) -> bool:
        """Cancel the pending call for *key*; returns True if one was pending."""
        with self._lock:
            pending = self._timers.pop(key, None)
        if pending is None:
            return False
        pending.cancel()
        return True

    def cancel_all(self) -> None:
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def pending(self, key: str) -> bool:
        with self._lock:
            return key in self._timers

    def _fire(self, key: str, func: Callable, args: tuple, kwargs: dict) -> None:
        with self._lock:
            # A newer schedule() may have replaced this timer after it started firing
            if self._timers.get(key) is not threading.current_thread():
                return
            del self._timers[key]
        try:
            func(*args, **kwargs)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Debounced call for %r failed", key)
