"""
Upstream clients, built once at startup and shared by every request.

- SolanaRpc: blocking solana-py client for getSlot / getAccountInfo.
- SolscanClient: async httpx client for the Solscan token transfer endpoint.
"""

from solana_relay.clients.rpc import SolanaRpc
from solana_relay.clients.solscan import SolscanClient

__all__ = ["SolanaRpc", "SolscanClient"]
