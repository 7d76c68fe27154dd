from __future__ import annotations

import random

import pytest

from crckit.codec.bits import reflect


def test_reflect_byte_examples():
    assert reflect(0x01, 8) == 0x80
    assert reflect(0x80, 8) == 0x01
    assert reflect(0xF0, 8) == 0x0F
    assert reflect(0xA5, 8) == 0xA5


def test_reflect_narrow_and_wide_widths():
    assert reflect(0b0010, 4) == 0b0100
    assert reflect(0b00001, 5) == 0b10000
    assert reflect(0x0001, 16) == 0x8000
    assert reflect(0x04C11DB7, 32) == 0xEDB88320


def test_reflect_ignores_bits_above_width():
    assert reflect(0x1F0, 4) == 0x0
    assert reflect(0x101, 8) == 0x80


@pytest.mark.parametrize("width", [1, 4, 5, 7, 8, 12, 16, 24, 31, 32])
def test_reflect_is_self_inverse(width):
    rng = random.Random(width)
    values = {0, (1 << width) - 1} | {rng.randrange(1 << width) for _ in range(200)}
    for x in values:
        assert reflect(reflect(x, width), width) == x


def test_reflect_rejects_zero_width():
    with pytest.raises(ValueError):
        reflect(1, 0)
