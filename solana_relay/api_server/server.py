"""
FastAPI server — relay over a Solana RPC node and the Solscan public API.

create_app() wires settings, middleware, routes and the RelayError handler.
Upstream clients are built once in the lifespan and shared by every request.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from solana_relay import __version__
from solana_relay.api_server.middleware import install_middleware
from solana_relay.api_server.routes import router
from solana_relay.clients import SolanaRpc, SolscanClient
from solana_relay.config import Settings, get_settings
from solana_relay.core.exceptions import RelayError
from solana_relay.relay_logging import get_logger

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Lifespan: shared upstream clients
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the RPC and Solscan clients on startup; close Solscan's connection pool on shutdown."""
    settings: Settings = app.state.settings
    app.state.rpc = SolanaRpc(
        settings.solana_rpc_url,
        commitment=settings.solana_commitment,
        timeout_sec=settings.rpc_timeout_sec,
    )
    app.state.solscan = SolscanClient(
        settings.solscan_api_url,
        limit=settings.solscan_transfer_limit,
        timeout_sec=settings.solscan_timeout_sec,
    )
    logger.info(
        "relay_clients_ready",
        rpc_url=settings.solana_rpc_url,
        commitment=settings.solana_commitment,
        rpc_timeout_sec=settings.rpc_timeout_sec,
        solscan_url=settings.solscan_api_url,
        solscan_timeout_sec=settings.solscan_timeout_sec,
    )

    yield

    await app.state.solscan.aclose()
    logger.info("relay_clients_closed")


# -----------------------------------------------------------------------------
# Error handling
# -----------------------------------------------------------------------------

async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Render any RelayError as {"error": message} with its status code."""
    logger.warning(
        "relay_request_failed",
        path=request.url.path,
        status=exc.status_code,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# -----------------------------------------------------------------------------
# App
# -----------------------------------------------------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Solana Relay API",
        description="Relays slot, account and token transfer queries to Solana RPC and Solscan.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_exception_handler(RelayError, relay_error_handler)
    install_middleware(app, settings)
    app.include_router(router)
    return app


app = create_app()
