"""
Application settings.

Responsibilities:
- Load configuration from environment variables and .env.
- Validate settings and provide defaults matching the public gateway
  (mainnet-beta RPC, Solscan public API, 127.0.0.1:3000, open CORS).
- Expose one frozen Settings object for the API server, clients and entrypoint.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field

from solana_relay.config.env import (
    MAINNET_RPC_URL,
    SOLSCAN_PUBLIC_API_URL,
    env_int,
    env_list,
    env_str,
    env_timeout,
    load_relay_env,
)

COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")
DEFAULT_TRANSFER_LIMIT = 50
ANY = ["*"]


@dataclass(frozen=True)
class Settings:
    """Relay configuration. Timeouts of None mean the upstream call is not bounded."""

    solana_rpc_url: str = MAINNET_RPC_URL
    solana_commitment: str = "confirmed"
    rpc_timeout_sec: float | None = None
    solscan_api_url: str = SOLSCAN_PUBLIC_API_URL
    solscan_transfer_limit: int = DEFAULT_TRANSFER_LIMIT
    solscan_timeout_sec: float | None = None
    api_host: str = "127.0.0.1"
    api_port: int = 3000
    cors_allow_origins: list[str] = field(default_factory=lambda: list(ANY))
    cors_allow_methods: list[str] = field(default_factory=lambda: list(ANY))
    cors_allow_headers: list[str] = field(default_factory=lambda: list(ANY))

    def __post_init__(self) -> None:
        if self.solana_commitment not in COMMITMENT_LEVELS:
            raise ValueError(
                f"SOLANA_COMMITMENT must be one of {', '.join(COMMITMENT_LEVELS)}, "
                f"got {self.solana_commitment!r}"
            )
        if not (1 <= self.api_port <= 65535):
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")
        if self.solscan_transfer_limit <= 0:
            raise ValueError("SOLSCAN_TRANSFER_LIMIT must be positive")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (after loading .env)."""
        load_relay_env()
        return cls(
            solana_rpc_url=env_str("SOLANA_RPC_URL", MAINNET_RPC_URL),
            solana_commitment=env_str("SOLANA_COMMITMENT", "confirmed").lower(),
            rpc_timeout_sec=env_timeout("RPC_TIMEOUT_SEC"),
            solscan_api_url=env_str("SOLSCAN_API_URL", SOLSCAN_PUBLIC_API_URL).rstrip("/"),
            solscan_transfer_limit=env_int("SOLSCAN_TRANSFER_LIMIT", DEFAULT_TRANSFER_LIMIT),
            solscan_timeout_sec=env_timeout("SOLSCAN_TIMEOUT_SEC"),
            api_host=env_str("API_HOST", "127.0.0.1"),
            api_port=env_int("API_PORT", 3000),
            cors_allow_origins=env_list("CORS_ALLOW_ORIGINS", ANY),
            cors_allow_methods=env_list("CORS_ALLOW_METHODS", ANY),
            cors_allow_headers=env_list("CORS_ALLOW_HEADERS", ANY),
        )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings (read once per process).

    Tests that change the environment call get_settings.cache_clear().
    """
    return Settings.from_env()
