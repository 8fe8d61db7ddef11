"""
Structured JSON logging for the relay.

LOG_LEVEL and LOG_FORMAT come from the environment or the project-root .env,
read before structlog is configured so the entrypoint's first log line already
honours them. Every module logs through get_logger(__name__) with a snake_case
event name plus key/value context.

Only stdlib logging, python-dotenv and structlog here; no solana_relay imports
to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import structlog
from dotenv import load_dotenv

# relay_logging/ -> solana_relay/ -> project root
_ENV_PATH = Path(__file__).resolve().parents[2] / ".env"


def read_log_settings(env_path: Path = _ENV_PATH) -> tuple[int, str]:
    """
    Return (level, format) from LOG_LEVEL / LOG_FORMAT.

    env_path is loaded first without overriding variables already set. Unknown
    levels fall back to INFO; any format other than "json" renders for the console.
    """
    load_dotenv(env_path, override=False)
    level_name = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    log_format = (os.getenv("LOG_FORMAT") or "json").strip().lower()
    return getattr(logging, level_name, logging.INFO), log_format


LOG_LEVEL_VALUE, LOG_FORMAT = read_log_settings()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type for JSON output."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_structlog(level: int = LOG_LEVEL_VALUE, log_format: str = LOG_FORMAT) -> None:
    """Configure structlog: level filter, timestamp, and a JSON or console renderer on stdout."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
    ]
    if log_format == "json":
        processors += [_normalize_event, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("pool_lookup", pool_id=addr, lamports=1_000)
    """
    return structlog.get_logger(name).bind(logger=name)
