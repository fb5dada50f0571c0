"""Fixed-interval rate limiting for calls to external services.

Keeps a minimum spacing between consecutive calls. Used as a context manager
around each call, the spacing is measured from the completion of the previous
call, so a slow call never shortens the pause that follows it.

Usage:
    limiter = IntervalRateLimiter(interval_seconds=1.0)

    for item in items:
        with limiter:
            client.call(item)
"""

import threading
import time
from typing import Callable, Optional

import structlog

logger = structlog.get_logger()


class IntervalRateLimiter:
    """Gate that lets one call through per `interval_seconds`.

    Thread-safe: concurrent callers reserve consecutive slots under a lock and
    sleep outside of it, so calls made from a worker pool are spaced by at
    least the interval as well.

    Attributes:
        interval_seconds: Minimum spacing between two calls.
    """

    def __init__(
        self,
        interval_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval_seconds < 0:
            raise ValueError("interval_seconds must be >= 0")
        self.interval_seconds = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last: Optional[float] = None

    def acquire(self) -> float:
        """Block until the next call may start.

        Returns:
            Seconds spent waiting.
        """
        with self._lock:
            now = self._clock()
            wait = 0.0
            if self._last is not None:
                wait = max(0.0, self._last + self.interval_seconds - now)
            # Reserve the slot so concurrent callers queue behind it.
            self._last = now + wait

        if wait > 0:
            logger.debug("rate_limit_wait", wait_seconds=round(wait, 3))
            self._sleep(wait)
        return wait

    def release(self) -> None:
        """Record the completion of a call; the next slot starts from here."""
        with self._lock:
            now = self._clock()
            if self._last is None or now > self._last:
                self._last = now

    def __enter__(self) -> "IntervalRateLimiter":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
