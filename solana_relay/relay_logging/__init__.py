"""
Structured logging for the relay.

JSON logs with timestamp, level and event_type. Use get_logger() in every module.
"""

from solana_relay.relay_logging.logger import get_logger

__all__ = ["get_logger"]
