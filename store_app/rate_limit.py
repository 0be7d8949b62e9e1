"""
Per-client request throttling.

A rolling-window limiter applied before every request. Each client,
identified by its remote address, may make at most ``max_requests``
accepted requests within any ``window_seconds`` span; further requests
receive ``429 Too Many Requests`` until older ones age out of the window.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from collections import deque
from collections.abc import Callable

from flask import Flask, Response, jsonify, request

logger = logging.getLogger(__name__)


class SlidingWindowRateLimiter:
    """
    Track accepted request timestamps per client key.

    Args:
        max_requests: Requests allowed per client within the window.
        window_seconds: Length of the rolling window.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()

    def hit(self, key: str) -> tuple[bool, float]:
        """
        Record a request for ``key`` if it is within the limit.

        Returns:
            Tuple of (allowed, retry_after_seconds). ``retry_after`` is 0
            for allowed requests; rejected requests are not recorded.
        """
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._evict_expired(now)

            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] >= self.window_seconds:
                hits.popleft()

            if len(hits) >= self.max_requests:
                return False, self.window_seconds - (now - hits[0])

            hits.append(now)
            return True, 0.0

    def _evict_expired(self, now: float) -> None:
        """Drop clients whose newest request has left the window."""
        expired = [
            key
            for key, hits in self._hits.items()
            if not hits or now - hits[-1] >= self.window_seconds
        ]
        for key in expired:
            del self._hits[key]
        self._last_sweep = now
        if expired:
            logger.debug("Evicted %d idle rate-limit clients", len(expired))


def init_rate_limiter(app: Flask) -> SlidingWindowRateLimiter | None:
    """
    Attach a limiter to ``app`` when ``RATE_LIMIT_ENABLED`` is set.

    The limiter is stored in ``app.extensions["rate_limiter"]`` and
    enforced by a ``before_request`` hook.

    Returns:
        The configured limiter, or None when throttling is disabled.
    """
    if not app.config.get("RATE_LIMIT_ENABLED"):
        logger.info("Rate limiting disabled")
        return None

    limiter = SlidingWindowRateLimiter(
        max_requests=int(app.config["RATE_LIMIT_MAX_REQUESTS"]),
        window_seconds=float(app.config["RATE_LIMIT_WINDOW_SECONDS"]),
    )
    app.extensions["rate_limiter"] = limiter

    @app.before_request
    def enforce_rate_limit() -> tuple[Response, int] | None:
        client_key = request.remote_addr or "unknown"
        allowed, retry_after = limiter.hit(client_key)
        if allowed:
            return None

        logger.warning("Rate limit exceeded for %s on %s %s", client_key, request.method, request.path)
        response = jsonify({"error": "Too many requests, please try again later"})
        response.headers["Retry-After"] = str(max(1, math.ceil(retry_after)))
        return response, 429

    logger.info(
        "Rate limiting enabled: %d requests per %.0f seconds",
        limiter.max_requests,
        limiter.window_seconds,
    )
    return limiter
