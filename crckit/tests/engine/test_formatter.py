from __future__ import annotations

import pytest

from crckit.engine.formatter import (
    ByteOrder,
    describe_lines,
    format_binary,
    format_hex,
    format_poly,
    split_bytes,
)
from crckit.model.catalog import ParameterTable, lookup


def test_single_byte_ignores_byte_order():
    assert format_hex(0x06, 1, ByteOrder.NORMAL) == "06"
    assert format_hex(0x06, 1, ByteOrder.SWAPPED) == "06"
    assert format_hex(0xF0, 1) == "F0"


def test_two_bytes_normal_and_swapped():
    assert format_hex(0xABCD, 2, ByteOrder.NORMAL) == "ABCD"
    assert format_hex(0xABCD, 2, ByteOrder.SWAPPED) == "CDAB"
    assert format_hex(0xABCD, 2, "swapped") == "CDAB"


def test_four_bytes_normal_and_swapped():
    assert format_hex(0xCBF43926, 4, ByteOrder.NORMAL) == "CBF43926"
    assert format_hex(0xCBF43926, 4, ByteOrder.SWAPPED) == "2639F4CB"


def test_hex_is_zero_padded_to_byte_count():
    assert format_hex(0x1, 2) == "0001"
    assert format_hex(0x1, 4, ByteOrder.SWAPPED) == "01000000"


@pytest.mark.parametrize("value, count", [(0xABCD, 2), (0x0376E6E7, 4), (0x00FF, 2), (0x123456, 3)])
def test_byte_order_swap_is_involutive(value, count):
    swapped = format_hex(value, count, ByteOrder.SWAPPED)
    assert format_hex(int(swapped, 16), count, ByteOrder.SWAPPED) == format_hex(value, count, ByteOrder.NORMAL)
    assert len(swapped) == 2 * count


def test_split_bytes_is_lsb_first():
    assert split_bytes(0x11223344, 4) == [0x44, 0x33, 0x22, 0x11]


def test_format_hex_rejects_zero_byte_count():
    with pytest.raises(ValueError):
        format_hex(0, 0)


def test_byte_order_parse():
    assert ByteOrder.parse("NORMAL") is ByteOrder.NORMAL
    assert ByteOrder.parse(ByteOrder.SWAPPED) is ByteOrder.SWAPPED
    with pytest.raises(ValueError):
        ByteOrder.parse("big")


def test_binary_padded_to_width():
    assert format_binary(0x4B37, 16) == "0100101100110111"
    assert format_binary(0x4, 4) == "0100"
    assert format_binary(0x06, 8) == "00000110"
    assert len(format_binary(0, 32)) == 32


def test_format_poly_pads_to_nibbles():
    assert format_poly(lookup("crc16-modbus")) == "8005"
    assert format_poly(lookup("crc5-usb")) == "05"
    assert format_poly(lookup("crc4-itu")) == "3"
    assert format_poly(lookup("crc32")) == "04C11DB7"


def test_describe_lines_for_crc():
    lines = describe_lines(ParameterTable.default().info("crc16-modbus"))
    assert lines == [
        "NAME:   CRC-16/MODBUS  (x16 + x15 + x2 + 1)",
        "WIDTH:  16",
        "POLY:   0x8005",
        "INIT:   0xFFFF",
        "XOROUT: 0x0000",
        "REFIN:  True",
        "REFOUT: True",
    ]


def test_describe_lines_for_checksum():
    lines = describe_lines(ParameterTable.default().info("sum"))
    assert lines == ["NAME:   Checksum  (8-bit sum)", "WIDTH:  8"]
