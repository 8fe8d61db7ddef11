"""
HTTP middleware — CORS and request logging.

Responsibilities:
- Cross-origin policy from settings (any origin, method and header unless narrowed).
- One structured log line per request with method, path, status and duration.
"""

from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from solana_relay.config import Settings
from solana_relay.relay_logging import get_logger

logger = get_logger(__name__)


async def log_requests(request: Request, call_next):
    t_start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - t_start) * 1000, 2),
    )
    return response


def install_middleware(app: FastAPI, settings: Settings) -> None:
    """Attach request logging and the configured CORS policy (CORS outermost)."""
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    logger.info(
        "cors_configured",
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
