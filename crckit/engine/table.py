# crckit/engine/table.py
from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from crckit.codec.bits import reflect
from crckit.model.algorithm import CRCParameters
from .crc import crc_bitwise, finalize, fold_offset, fold_shift


REFLECT8: tuple[int, ...] = tuple(reflect(i, 8) for i in range(256))


def supports_table(params: CRCParameters) -> bool:
    """
    Byte-at-a-time tables need the register to fill its shift window
    (or fit in the low byte for the right-shifting case).
    """
    return params.width <= 8 or params.width in (16, 32)


@lru_cache(maxsize=64)
def build_table(params: CRCParameters) -> tuple[int, ...]:
    """table[i] = register after 8 division steps starting from byte i at the fold offset."""
    if not supports_table(params):
        raise ValueError(f"No lookup table for CRC width {params.width}")
    offset = fold_offset(params)
    return tuple(fold_shift(i << offset, params) for i in range(256))


def crc_table(data: Iterable[int], params: CRCParameters) -> int:
    """Table-driven CRC; bit-identical to crc_bitwise()."""
    if not supports_table(params):
        return crc_bitwise(data, params)

    table = build_table(params)
    mask = params.mask
    crc = params.init & mask

    if params.width <= 8:
        # register and byte both fit in 8 bits: the whole step is one lookup
        for b in data:
            b &= 0xFF
            if params.ref_in:
                b = REFLECT8[b]
            crc = table[crc ^ b]
    else:
        top = params.width - 8
        for b in data:
            b &= 0xFF
            if params.ref_in:
                b = REFLECT8[b]
            crc = ((crc << 8) & mask) ^ table[((crc >> top) ^ b) & 0xFF]

    return finalize(crc, params)
