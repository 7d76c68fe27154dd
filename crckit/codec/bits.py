# crckit/codec/bits.py
from __future__ import annotations


def reflect(value: int, width: int) -> int:
    """
    Reverse the low `width` bits of `value`.

    Bit i of the input becomes bit (width - 1 - i) of the output. Bits at or
    above `width` are ignored, so reflect(reflect(x, w), w) == x for x < 2**w.
    """
    if width < 1:
        raise ValueError(f"reflect width must be >= 1, got {width}")

    r = 0
    for _ in range(width):
        r = (r << 1) | (value & 1)
        value >>= 1
    return r
