# crckit/utils/hashing.py
from __future__ import annotations

import hashlib
from pathlib import Path

CHUNK_SIZE = 64 * 1024


def sha256_file(path: str | Path, *, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Fingerprint a catalog file (streamed).
    Returns lowercase hex digest.
    """
    digest = hashlib.sha256()
    with Path(path).open("rb") as fh:
        while chunk := fh.read(chunk_size):
            digest.update(chunk)
    return digest.hexdigest()
