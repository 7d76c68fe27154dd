# crckit/__init__.py

from .codec import InputMode, decode, reflect
from .engine import ByteOrder, ChecksumEngine, ChecksumResult, compute, format_binary, format_hex
from .model import AlgorithmId, CRCParameters, ParameterTable, lookup

__all__ = [
    "InputMode", "decode", "reflect",
    "AlgorithmId", "CRCParameters", "ParameterTable", "lookup",
    "ChecksumEngine", "ChecksumResult", "compute",
    "ByteOrder", "format_hex", "format_binary"]
