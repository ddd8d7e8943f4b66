"""Monotonic per-minute counter."""

import threading

from miniulid.codec.bits import MAX_DISCRIMINATOR
from miniulid.codec.timesplit import truncate_to_minute
from miniulid.core.errors import CounterOverflowError
from miniulid.discriminator.base import DiscriminatorSource
from miniulid.internal.logging import get_logger

_default_counter = None
_default_counter_lock = threading.Lock()


class MonotonicCounter(DiscriminatorSource):
    """
    Gap-free, strictly increasing discriminators within a minute.

    Unique only within one instance; two counters (or two processes) in the
    same minute hand out the same values.
    """

    name = "counter"

    def __init__(self):
        self._lock = threading.Lock()
        self._minute = None
        self._last = 0

    @property
    def current_minute(self):
        return self._minute

    @property
    def last_value(self):
        return self._last

    def next(self, now):
        minute = truncate_to_minute(now)
        with self._lock:
            if minute != self._minute:
                if self._minute is not None:
                    get_logger().debug("counter rollover", minute=minute.isoformat(), previous=self._last)
                self._minute = minute
                self._last = 0
                return 0

            if self._last == MAX_DISCRIMINATOR:
                get_logger().warn("counter exhausted", minute=minute.isoformat())
                raise CounterOverflowError(
                    f"counter exhausted {MAX_DISCRIMINATOR + 1} values in minute {minute.isoformat()}",
                    minute=minute, value=self._last + 1, maximum=MAX_DISCRIMINATOR,
                )

            self._last += 1
            return self._last

    def reset(self):
        with self._lock:
            self._minute = None
            self._last = 0


def get_default_counter():
    """Process-wide counter shared by every caller that asks for it."""
    global _default_counter
    if _default_counter is None:
        with _default_counter_lock:
            if _default_counter is None:
                _default_counter = MonotonicCounter()
    return _default_counter


def reset_default_counter():
    global _default_counter
    with _default_counter_lock:
        _default_counter = None
