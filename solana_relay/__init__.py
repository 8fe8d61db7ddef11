"""
Solana relay — HTTP gateway over a Solana RPC node and the Solscan public API.

Validates account addresses, forwards slot/account lookups to the RPC node and
transaction-history queries to Solscan, and reshapes the results into JSON.
"""

__version__ = "0.1.0"
