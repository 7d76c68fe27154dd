# crckit/engine/crc.py
from __future__ import annotations

from typing import Iterable

from crckit.codec.bits import reflect
from crckit.model.algorithm import CRCParameters


def fold_shift(crc: int, params: CRCParameters) -> int:
    """
    Run the 8 division steps on a register that already has a byte folded in.

    Alignment by width:
      <= 8  : test bit 0, shift right
      <= 16 : test bit 15, shift left
      > 16  : test bit 31, shift left
    The register is masked to `width` after every step.
    """
    mask = params.mask
    poly = params.poly & mask

    if params.width <= 8:
        for _ in range(8):
            crc = ((crc >> 1) ^ poly) & mask if (crc & 0x01) else (crc >> 1) & mask
    elif params.width <= 16:
        for _ in range(8):
            crc = ((crc << 1) ^ poly) & mask if (crc & 0x8000) else (crc << 1) & mask
    else:
        for _ in range(8):
            crc = ((crc << 1) ^ poly) & mask if (crc & 0x80000000) else (crc << 1) & mask
    return crc


def fold_offset(params: CRCParameters) -> int:
    """Bit position an input byte is XORed in at."""
    if params.width <= 8:
        return 0
    if params.width <= 16:
        return 8
    return 24


def finalize(crc: int, params: CRCParameters) -> int:
    if params.ref_out:
        crc = reflect(crc, params.width)
    return (crc ^ params.xor_out) & params.mask


def crc_bitwise(data: Iterable[int], params: CRCParameters) -> int:
    crc = params.init & params.mask
    offset = fold_offset(params)

    for b in data:
        b &= 0xFF
        if params.ref_in:
            b = reflect(b, 8)
        crc = fold_shift(crc ^ (b << offset), params)

    return finalize(crc, params)
