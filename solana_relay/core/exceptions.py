"""
Relay exceptions.

Every failure a handler can surface is a RelayError carrying the HTTP status
and the human-readable message rendered as {"error": message}.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base class for failures rendered as an error response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def with_context(self, prefix: str) -> "RelayError":
        """Same error kind with the message prefixed, e.g. 'Failed to get slot: <message>'."""
        return type(self)(f"{prefix}: {self.message}")


class ValidationError(RelayError):
    """Malformed client input (e.g. an address that is not a public key)."""

    status_code = 400


class UpstreamError(RelayError):
    """The upstream service answered with a failure (RPC error, missing account)."""


class TransportError(RelayError):
    """The upstream service could not be reached or its body could not be decoded."""


class SchedulingError(RelayError):
    """Dispatching a blocking call to the worker pool failed."""
