"""
Solscan public API client — token transfer history.

One GET per call to {base_url}/token/transfers?token=<token>&limit=<limit>. The
token is opaque: it is not validated as an address. The decoded JSON body is
returned unmodified; the upstream HTTP status is not inspected.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from solana_relay.core.exceptions import TransportError
from solana_relay.relay_logging import get_logger

logger = get_logger(__name__)

TRANSFERS_PATH = "/token/transfers"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered back
    raise ValueError(f"invalid JSON constant {name}")


class SolscanClient:
    """Async client for the Solscan token transfer endpoint. Shared across requests."""

    def __init__(
        self,
        base_url: str,
        *,
        limit: int = 50,
        timeout_sec: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: Solscan API root, e.g. https://public-api.solscan.io.
            limit: Number of transfer records requested per call.
            timeout_sec: Per-request bound in seconds; None leaves calls unbounded.
            http_client: Prebuilt httpx.AsyncClient (tests); built when omitted.
        """
        if limit <= 0:
            raise ValueError("limit must be positive")
        self.base_url = base_url.rstrip("/")
        self.limit = limit
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout_sec)

    async def get_token_transfers(self, token: str) -> Any:
        """
        Fetch recent transfers for token.

        Raises TransportError("Failed to fetch from Solscan: ...") when the request
        fails and TransportError("Failed to parse response: ...") when the body is
        not JSON.
        """
        url = f"{self.base_url}{TRANSFERS_PATH}"
        try:
            response = await self._http.get(url, params={"token": token, "limit": self.limit})
        except httpx.HTTPError as e:
            logger.error("solscan_fetch_failed", token=token, error=str(e))
            raise TransportError(f"Failed to fetch from Solscan: {str(e) or type(e).__name__}") from e

        try:
            data = json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as e:
            logger.error("solscan_parse_failed", token=token, status=response.status_code, error=str(e))
            raise TransportError(f"Failed to parse response: {e}") from e

        logger.info("solscan_transfers_fetched", token=token, status=response.status_code)
        return data

    async def aclose(self) -> None:
        await self._http.aclose()
