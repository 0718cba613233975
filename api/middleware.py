"""
Global middleware — request timing and front-end hit counting.
"""

from __future__ import annotations

import logging
import threading
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

APP_PREFIX = "/app"


class HitCounter:
    """Thread-safe count of requests served from the front-end mount."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hits = 0

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._hits


def register_middleware(app: FastAPI) -> None:
    """Attach the hit counter and the app-level middleware."""
    app.state.hits = HitCounter()

    @app.middleware("http")
    async def count_app_hits(request: Request, call_next):
        path = request.url.path
        if path == APP_PREFIX or path.startswith(APP_PREFIX + "/"):
            request.app.state.hits.increment()
        return await call_next(request)

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response
