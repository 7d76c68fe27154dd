# crckit/model/algorithm.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from crckit.core.errors import UnsupportedAlgorithm


MIN_WIDTH = 4
MAX_WIDTH = 32
CHECKSUM_WIDTH = 8  # sum / xor


class AlgorithmId(str, Enum):
    """Closed set of supported algorithms (value = stable identifier)."""

    SUM = "sum"
    XOR = "xor"
    CRC4_ITU = "crc4-itu"
    CRC5_EPC = "crc5-epc"
    CRC5_ITU = "crc5-itu"
    CRC5_USB = "crc5-usb"
    CRC6_ITU = "crc6-itu"
    CRC7_MMC = "crc7-mmc"
    CRC8 = "crc8"
    CRC8_ITU = "crc8-itu"
    CRC8_ROHC = "crc8-rohc"
    CRC8_MAXIM = "crc8-maxim"
    CRC16_IBM = "crc16-ibm"
    CRC16_MAXIM = "crc16-maxim"
    CRC16_USB = "crc16-usb"
    CRC16_MODBUS = "crc16-modbus"
    CRC16_CCITT = "crc16-ccitt"
    CRC16_CCITT_FALSE = "crc16-ccitt-false"
    CRC16_X25 = "crc16-x25"
    CRC16_XMODEM = "crc16-xmodem"
    CRC16_DNP = "crc16-dnp"
    CRC32 = "crc32"
    CRC32_MPEG2 = "crc32-mpeg2"

    @property
    def is_crc(self) -> bool:
        return self not in (AlgorithmId.SUM, AlgorithmId.XOR)

    @classmethod
    def parse(cls, value: "AlgorithmId | str") -> "AlgorithmId":
        if isinstance(value, cls):
            return value
        want = str(value).strip().lower()
        for algo in cls:
            if algo.value == want:
                return algo
        raise UnsupportedAlgorithm(
            f"Unknown algorithm '{value}'.",
            hint="Run: crckit algorithms",
            details={"algorithm": str(value)},
        )


@dataclass(frozen=True, slots=True)
class CRCParameters:
    """
    Rocksoft-style CRC parameter record.

    Attributes:
        width: Register/result size in bits (4..32).
        poly: Generator polynomial (without the implicit top bit).
        init: Initial register value.
        xor_out: Final XOR mask.
        ref_in: Reflect each input byte before folding it in.
        ref_out: Reflect the final register before the final XOR.
    """
    width: int
    poly: int
    init: int = 0
    xor_out: int = 0
    ref_in: bool = False
    ref_out: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError(f"CRC width must be an int, got {type(self.width).__name__}")
        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise ValueError(f"CRC width must be in {MIN_WIDTH}..{MAX_WIDTH}, got {self.width}")

        for name in ("poly", "init", "xor_out"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"CRC {name} must be an int, got {type(v).__name__}")
            if v < 0 or v > self.mask:
                raise ValueError(f"CRC {name}=0x{v:X} does not fit in {self.width} bits")

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def byte_count(self) -> int:
        return (self.width + 7) // 8

    def as_dict(self) -> dict:
        return {
            "width": self.width,
            "poly": self.poly,
            "init": self.init,
            "xor_out": self.xor_out,
            "ref_in": self.ref_in,
            "ref_out": self.ref_out,
        }


@dataclass(frozen=True, slots=True)
class AlgorithmInfo:
    """Catalog entry: display metadata + CRC parameters (None for sum/xor)."""
    id: AlgorithmId
    name: str
    description: str = ""
    params: Optional[CRCParameters] = None

    @property
    def width(self) -> int:
        return self.params.width if self.params else CHECKSUM_WIDTH

    @property
    def byte_count(self) -> int:
        return self.params.byte_count if self.params else 1
