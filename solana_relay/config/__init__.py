"""
Configuration management for the relay.

Loads settings from environment variables and an optional .env file in the
project root. get_settings() is the single source of truth.
"""

from solana_relay.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
