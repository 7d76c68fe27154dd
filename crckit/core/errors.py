# crckit/core/errors.py
from __future__ import annotations


class CrcKitError(Exception):
    """
    Base class for all expected operational errors in crckit.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, UI messages, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Input errors (raised before any checksum work)
# ---------------------------------------------------------------------------

class DecodeError(CrcKitError):
    """
    Raw input text could not be turned into a byte sequence.

    Examples:
      - non-hex character in hex mode ("GG", "0x12", "+1")
    """
    code = "decode_error"


class UnsupportedAlgorithm(CrcKitError):
    """
    Algorithm identifier has no matching catalog entry.

    Examples:
      - unknown identifier ("crc64")
      - CRC parameter lookup for a plain checksum ("sum", "xor")
    """
    code = "unsupported_algorithm"


# ---------------------------------------------------------------------------
# Catalog / setup errors
# ---------------------------------------------------------------------------

class CatalogError(CrcKitError):
    """
    Algorithm catalog is missing, malformed or incomplete.

    Examples:
      - algorithms.yml not found
      - entry with width outside 4..32
      - algorithm id without a catalog entry
    """
    code = "catalog_error"
