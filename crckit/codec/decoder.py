# crckit/codec/decoder.py
from __future__ import annotations

import re
from enum import Enum

from crckit.core.errors import DecodeError


_WHITESPACE = re.compile(r"\s+")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class InputMode(str, Enum):
    TEXT = "text"
    HEX = "hex"

    @classmethod
    def parse(cls, value: "InputMode | str") -> "InputMode":
        if isinstance(value, cls):
            return value
        want = str(value).strip().lower()
        for mode in cls:
            if mode.value == want:
                return mode
        raise ValueError(f"Unknown input mode '{value}' (use: text, hex)")


def _text_unit(ch: str) -> int:
    # Characters above U+FFFF count as their leading UTF-16 surrogate.
    cp = ord(ch)
    if cp > 0xFFFF:
        cp = 0xD800 + ((cp - 0x10000) >> 10)
    return cp & 0xFF


def decode_text(text: str) -> bytes:
    # One byte per character: low 8 bits of its UTF-16 leading unit.
    return bytes(_text_unit(ch) for ch in text)


def decode_hex(text: str) -> bytes:
    """
    Whitespace-insensitive hex decoding.

    Pairs of digits become bytes; a single trailing digit is the high nibble of
    a final byte ("A" -> 0xA0). Anything that is not a hex digit is rejected.
    """
    digits = _WHITESPACE.sub("", text)

    for pos, ch in enumerate(digits):
        if ch not in _HEX_DIGITS:
            raise DecodeError(
                f"Invalid hex character {ch!r} at position {pos}.",
                hint="Hex input accepts 0-9, A-F and whitespace only (e.g. '11 22').",
                details={"char": ch, "position": pos},
            )

    if len(digits) % 2:
        digits += "0"

    return bytes(int(digits[i: i + 2], 16) for i in range(0, len(digits), 2))


def decode(text: str, mode: InputMode | str) -> bytes:
    """Turn raw input text into a fresh byte sequence under `mode`."""
    mode = InputMode.parse(mode)
    if mode is InputMode.TEXT:
        return decode_text(text)
    return decode_hex(text)
