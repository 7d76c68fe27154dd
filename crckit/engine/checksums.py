# crckit/engine/checksums.py
from __future__ import annotations

from typing import Iterable


def checksum_sum(data: Iterable[int]) -> int:
    """8-bit running sum with unsigned wraparound."""
    acc = 0
    for b in data:
        acc = (acc + (b & 0xFF)) & 0xFF
    return acc


def checksum_xor(data: Iterable[int]) -> int:
    acc = 0
    for b in data:
        acc ^= b & 0xFF
    return acc
