"""Transient upstream values, built per call and discarded after the response."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountSnapshot:
    """Balance and data length of one ledger account."""

    lamports: int
    data_size: int
