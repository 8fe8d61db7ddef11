"""
Main entrypoint: run the relay API with uvicorn.

Env: SOLANA_RPC_URL, SOLANA_COMMITMENT, RPC_TIMEOUT_SEC, SOLSCAN_API_URL,
SOLSCAN_TIMEOUT_SEC, API_HOST, API_PORT, CORS_ALLOW_*, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn solana_relay.api_server.app:app --host 127.0.0.1 --port 3000
"""

import os

# Configure structured JSON logging before other imports that may log
from solana_relay.relay_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings and serve the relay API in the main thread."""
    from solana_relay.config import get_settings

    settings = get_settings()

    from solana_relay.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        url=f"http://{settings.api_host}:{settings.api_port}",
        rpc_url=settings.solana_rpc_url,
    )
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
