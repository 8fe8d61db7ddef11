"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn solana_relay.api_server.app:app --host 127.0.0.1 --port 3000
"""

from solana_relay.api_server.server import app

__all__ = ["app"]
