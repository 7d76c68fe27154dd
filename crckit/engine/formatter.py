# crckit/engine/formatter.py
from __future__ import annotations

from enum import Enum

from crckit.model.algorithm import AlgorithmInfo, CRCParameters


class ByteOrder(str, Enum):
    NORMAL = "normal"      # most-significant byte first
    SWAPPED = "swapped"    # least-significant byte first

    @classmethod
    def parse(cls, value: "ByteOrder | str") -> "ByteOrder":
        if isinstance(value, cls):
            return value
        want = str(value).strip().lower()
        for order in cls:
            if order.value == want:
                return order
        raise ValueError(f"Unknown byte order '{value}' (use: normal, swapped)")


def split_bytes(raw_value: int, byte_count: int) -> list[int]:
    """Least-significant byte first."""
    return [(raw_value >> (8 * i)) & 0xFF for i in range(byte_count)]


def format_hex(raw_value: int, byte_count: int, byte_order: ByteOrder | str = ByteOrder.NORMAL) -> str:
    """
    Uppercase hex, no separators, exactly 2 * byte_count digits.

    Byte order only affects multi-byte results:
        0xABCD normal  -> "ABCD"
        0xABCD swapped -> "CDAB"
    """
    if byte_count < 1:
        raise ValueError(f"byte_count must be >= 1, got {byte_count}")

    order = ByteOrder.parse(byte_order)
    if byte_count == 1:
        return f"{raw_value & 0xFF:02X}"

    parts = split_bytes(raw_value, byte_count)
    if order is ByteOrder.NORMAL:
        parts.reverse()
    return "".join(f"{b:02X}" for b in parts)


def format_binary(raw_value: int, width: int) -> str:
    return format(raw_value, "b").zfill(width)


def format_poly(params: CRCParameters) -> str:
    return f"{params.poly:0{(params.width + 3) // 4}X}"


def _hex_field(value: int, params: CRCParameters) -> str:
    return f"{value:0{(params.width + 3) // 4}X}"


def describe_lines(info: AlgorithmInfo) -> list[str]:
    """Parameter model summary for display."""
    lines = [f"NAME:   {info.name}" + (f"  ({info.description})" if info.description else "")]
    p = info.params
    if p is None:
        lines.append(f"WIDTH:  {info.width}")
        return lines

    lines += [
        f"WIDTH:  {p.width}",
        f"POLY:   0x{format_poly(p)}",
        f"INIT:   0x{_hex_field(p.init, p)}",
        f"XOROUT: 0x{_hex_field(p.xor_out, p)}",
        f"REFIN:  {p.ref_in}",
        f"REFOUT: {p.ref_out}",
    ]
    return lines
