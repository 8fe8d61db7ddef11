"""
Solana RPC client — the two read operations the relay forwards.

Thin wrapper over solana.rpc.api.Client (blocking). Maps outcomes to the relay
taxonomy: a value on success, UpstreamError when the node answers with an
error or the account does not exist, TransportError when the node cannot be
reached or answers with a body that is not JSON-RPC. Calls are made from
worker threads; one instance is shared.
"""

from __future__ import annotations

from typing import Any

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.api import Client
from solana.rpc.commitment import Commitment
from solana.rpc.core import RPCException
from solders.errors import SerdeJSONError
from solders.pubkey import Pubkey

from solana_relay.core.exceptions import TransportError, UpstreamError
from solana_relay.core.models import AccountSnapshot
from solana_relay.relay_logging import get_logger

logger = get_logger(__name__)


def _transport_message(e: Exception) -> str:
    # SolanaRpcException keeps its text in error_msg, not args
    return getattr(e, "error_msg", None) or str(e) or type(e).__name__


class SolanaRpc:
    """Shared RPC client for getSlot and getAccountInfo."""

    def __init__(
        self,
        rpc_url: str,
        *,
        commitment: str = "confirmed",
        timeout_sec: float | None = None,
        client: Any = None,
    ) -> None:
        """
        Args:
            rpc_url: Solana RPC HTTP endpoint.
            commitment: processed | confirmed | finalized.
            timeout_sec: Per-request bound in seconds; None leaves calls unbounded.
            client: Prebuilt solana-py Client (tests); built from rpc_url when omitted.
        """
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        self.rpc_url = rpc_url
        self.commitment = commitment
        self._client = client if client is not None else Client(
            rpc_url,
            commitment=Commitment(commitment),
            timeout=timeout_sec,
        )

    def _call(self, method: str, fn: Any, *args: Any) -> Any:
        try:
            return fn(*args)
        except RPCException as e:
            logger.error("rpc_error", method=method, error=str(e))
            raise UpstreamError(str(e)) from e
        except (SolanaRpcException, httpx.HTTPError) as e:
            message = _transport_message(e)
            logger.error("rpc_transport_error", method=method, error=message)
            raise TransportError(message) from e
        except (SerdeJSONError, ValueError) as e:
            # body was not JSON-RPC (proxy error page, empty body)
            logger.error("rpc_decode_error", method=method, error=str(e))
            raise TransportError(str(e) or type(e).__name__) from e

    def get_slot(self) -> int:
        """Current slot at the configured commitment."""
        resp = self._call("getSlot", self._client.get_slot)
        return int(resp.value)

    def get_account(self, address: Pubkey) -> AccountSnapshot:
        """
        Lamport balance and data length of one account.

        A missing account is an UpstreamError, not a distinct not-found outcome.
        """
        resp = self._call("getAccountInfo", self._client.get_account_info, address)
        account = resp.value
        if account is None:
            logger.warning("rpc_account_not_found", pubkey=str(address))
            raise UpstreamError(f"AccountNotFound: pubkey={address}")
        return AccountSnapshot(lamports=int(account.lamports), data_size=len(account.data))
