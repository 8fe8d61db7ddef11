"""
API route definitions — relay endpoints.

Each handler validates its path parameters, makes at most two upstream calls
through the shared clients, and returns JSON. Failures are raised as
RelayError subclasses and rendered by the app's error handler.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from solana_relay.api_server.dispatch import run_blocking
from solana_relay.clients import SolanaRpc, SolscanClient
from solana_relay.core.exceptions import TransportError, UpstreamError
from solana_relay.core.models import AccountSnapshot
from solana_relay.relay_logging import get_logger
from solana_relay.utils.address import parse_address

logger = get_logger(__name__)

router = APIRouter()


# -----------------------------------------------------------------------------
# Dependencies: shared clients built in the app lifespan
# -----------------------------------------------------------------------------

def get_rpc(request: Request) -> SolanaRpc:
    return request.app.state.rpc


def get_solscan(request: Request) -> SolscanClient:
    return request.app.state.solscan


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------

class StatusResponse(BaseModel):
    """GET /solana/status response."""

    status: str = Field(..., description="Always 'connected' on success")
    current_slot: int = Field(..., ge=0, description="Current slot reported by the RPC node")


class PoolResponse(BaseModel):
    """GET /pool/{pool_id} response."""

    pool_id: str = Field(..., description="Account address as requested")
    lamports: int = Field(..., ge=0, description="Account balance in lamports")
    data_size: int = Field(..., ge=0, description="Account data length in bytes")


class TokenInfo(BaseModel):
    address: str = Field(..., description="Account address as requested")
    data_size: int = Field(..., ge=0, description="Account data length in bytes")


class TokenPairResponse(BaseModel):
    """GET /token-pair/{token_a}/{token_b} response."""

    token_a: TokenInfo
    token_b: TokenInfo


class ErrorResponse(BaseModel):
    error: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid address"},
    500: {"model": ErrorResponse, "description": "Upstream, transport or worker failure"},
}


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up. No upstream call."""
    return {"status": "ok"}


@router.get(
    "/solana/status",
    response_model=StatusResponse,
    responses={500: ERROR_RESPONSES[500]},
)
async def get_solana_status(rpc: SolanaRpc = Depends(get_rpc)) -> StatusResponse:
    """Current slot from the RPC node."""
    try:
        slot = await run_blocking(rpc.get_slot)
    except (UpstreamError, TransportError) as e:
        raise e.with_context("Failed to get slot") from e
    return StatusResponse(status="connected", current_slot=slot)


@router.get("/pool/{pool_id}", response_model=PoolResponse, responses=ERROR_RESPONSES)
async def get_pool_info(pool_id: str, rpc: SolanaRpc = Depends(get_rpc)) -> PoolResponse:
    """Balance and data size of one account. 400 before any RPC call when pool_id is not an address."""
    pubkey = parse_address(pool_id, "Invalid pool ID")
    try:
        account = await run_blocking(rpc.get_account, pubkey)
    except (UpstreamError, TransportError) as e:
        raise e.with_context("Failed to get account") from e
    return PoolResponse(pool_id=pool_id, lamports=account.lamports, data_size=account.data_size)


@router.get(
    "/token-pair/{token_a}/{token_b}",
    response_model=TokenPairResponse,
    responses=ERROR_RESPONSES,
)
async def get_token_pair_info(
    token_a: str,
    token_b: str,
    rpc: SolanaRpc = Depends(get_rpc),
) -> TokenPairResponse:
    """
    Data size of two accounts.

    token_a is validated before token_b, and both before any RPC call. Accounts are
    fetched in order inside one worker task; the first failure fails the request
    and no partial result is returned.
    """
    logger.info("token_pair_lookup", token_a=token_a, token_b=token_b)
    pubkey_a = parse_address(token_a, "Invalid token A address")
    pubkey_b = parse_address(token_b, "Invalid token B address")

    def fetch_pair() -> tuple[AccountSnapshot, AccountSnapshot]:
        return rpc.get_account(pubkey_a), rpc.get_account(pubkey_b)

    try:
        info_a, info_b = await run_blocking(fetch_pair)
    except (UpstreamError, TransportError) as e:
        raise e.with_context("Failed to get token info") from e
    return TokenPairResponse(
        token_a=TokenInfo(address=token_a, data_size=info_a.data_size),
        token_b=TokenInfo(address=token_b, data_size=info_b.data_size),
    )


@router.get("/transactions/{token}", responses={500: ERROR_RESPONSES[500]})
async def get_token_transactions(
    token: str,
    solscan: SolscanClient = Depends(get_solscan),
) -> JSONResponse:
    """Recent token transfers from Solscan, returned verbatim. token is passed through unvalidated."""
    logger.info("solscan_fetch", token=token)
    data = await solscan.get_token_transfers(token)
    return JSONResponse(content=data)
