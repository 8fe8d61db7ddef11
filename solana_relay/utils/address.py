"""Address validation utilities."""

from __future__ import annotations

from solders.pubkey import Pubkey

from solana_relay.core.exceptions import ValidationError


def parse_address(value: str, label: str) -> Pubkey:
    """
    Parse a base58 account address into a Pubkey.

    Purely syntactic: length and encoding only, no existence check. The input is
    not stripped or otherwise coerced. Raises ValidationError("<label>: <reason>").
    """
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise ValidationError(f"{label}: {e}") from e
