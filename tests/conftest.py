"""
Pytest fixtures for relay tests. Upstream clients are replaced by in-memory
stubs that record every call, injected through FastAPI dependency overrides.
"""

from __future__ import annotations

from typing import Any

import pytest

from solana_relay.core.exceptions import UpstreamError
from solana_relay.core.models import AccountSnapshot

# Valid Solana pubkeys (base58, 32 bytes)
POOL_ADDRESS = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
TOKEN_A = "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ"
TOKEN_B = "So11111111111111111111111111111111111111112"
MISSING_ADDRESS = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


class StubRpc:
    """Stands in for SolanaRpc. Unknown accounts fail like a missing account on the node."""

    def __init__(
        self,
        slot: int = 12345,
        accounts: dict[str, AccountSnapshot] | None = None,
        slot_error: Exception | None = None,
        account_errors: dict[str, Exception] | None = None,
    ) -> None:
        self.slot = slot
        self.accounts = dict(accounts or {})
        self.slot_error = slot_error
        self.account_errors = dict(account_errors or {})
        self.calls: list[tuple[str, ...]] = []

    def get_slot(self) -> int:
        self.calls.append(("get_slot",))
        if self.slot_error is not None:
            raise self.slot_error
        return self.slot

    def get_account(self, address: Any) -> AccountSnapshot:
        key = str(address)
        self.calls.append(("get_account", key))
        if key in self.account_errors:
            raise self.account_errors[key]
        if key not in self.accounts:
            raise UpstreamError(f"AccountNotFound: pubkey={key}")
        return self.accounts[key]


class StubSolscan:
    """Stands in for SolscanClient: returns payload or raises error."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload if payload is not None else []
        self.error = error
        self.calls: list[str] = []

    async def get_token_transfers(self, token: str) -> Any:
        self.calls.append(token)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def rpc_stub() -> StubRpc:
    return StubRpc(
        accounts={
            POOL_ADDRESS: AccountSnapshot(lamports=2_039_280, data_size=165),
            TOKEN_A: AccountSnapshot(lamports=1_461_600, data_size=82),
            TOKEN_B: AccountSnapshot(lamports=1_000_000_000, data_size=0),
        }
    )


@pytest.fixture
def solscan_stub() -> StubSolscan:
    return StubSolscan(payload=[{"signature": "5h6xBEauJ3PK6SWC", "amount": 1000, "decimals": 6}])


@pytest.fixture
def app(rpc_stub, solscan_stub):
    """Fresh app with default settings and stub clients; lifespan is not run."""
    from solana_relay.api_server.routes import get_rpc, get_solscan
    from solana_relay.api_server.server import create_app
    from solana_relay.config import Settings

    application = create_app(Settings())
    application.dependency_overrides[get_rpc] = lambda: rpc_stub
    application.dependency_overrides[get_solscan] = lambda: solscan_stub
    return application


@pytest.fixture
def client(app):
    """FastAPI TestClient over the stubbed app."""
    from fastapi.testclient import TestClient

    return TestClient(app)
