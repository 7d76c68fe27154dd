# crckit/app/config.py
from __future__ import annotations

from dataclasses import dataclass, field

from crckit.model.catalog import default_metadata_dir


@dataclass(frozen=True)
class CalculatorConfig:
    metadata_dir: str = field(default_factory=lambda: str(default_metadata_dir()))
    algorithm: str = "crc16-modbus"
    input_mode: str = "hex"
    byte_order: str = "normal"
    use_lookup_tables: bool = False
