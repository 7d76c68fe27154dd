from .compute import ChecksumEngine, ChecksumResult, compute
from .formatter import ByteOrder, format_binary, format_hex

__all__ = ["ChecksumEngine",
           "ChecksumResult",
           "compute",
           "ByteOrder",
           "format_hex",
           "format_binary"]
