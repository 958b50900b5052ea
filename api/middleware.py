"""
Global middleware.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

ANONYMOUS = "-"


def _requester(request: Request) -> str:
    """Name of the caller once ``authentication`` has accepted its token."""
    payload = getattr(request.state, "payload", None)
    if payload is None:
        return ANONYMOUS
    return f"{payload.name} ({payload.id})"


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.info(
            "%s %s %d %.3fs user=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            _requester(request),
        )
        return response
