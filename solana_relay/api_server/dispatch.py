"""
Worker-thread dispatch for blocking upstream calls.

The solana-py client is synchronous; its calls run in Starlette's thread pool
so the event loop keeps serving other requests. Errors the call raises itself
(RelayError subclasses) propagate unchanged. Anything else is a failure of the
dispatched task and surfaces as SchedulingError("Task failed: ...").
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from starlette.concurrency import run_in_threadpool

from solana_relay.core.exceptions import RelayError, SchedulingError
from solana_relay.relay_logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


async def run_blocking(fn: Callable[..., T], *args: Any) -> T:
    try:
        return await run_in_threadpool(fn, *args)
    except RelayError:
        raise
    except Exception as e:
        logger.error("worker_task_failed", task=getattr(fn, "__name__", repr(fn)), error=str(e))
        raise SchedulingError(f"Task failed: {e}") from e
