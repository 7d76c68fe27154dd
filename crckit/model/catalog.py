# crckit/model/catalog.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from crckit.core.errors import CatalogError, UnsupportedAlgorithm
from .algorithm import AlgorithmId, AlgorithmInfo, CRCParameters
from .loader import CatalogLoader


_log = logging.getLogger(__name__)


def default_metadata_dir() -> Path:
    # <package>/metadata, based on this file's location
    return Path(__file__).resolve().parents[1] / "metadata"


@dataclass(frozen=True, slots=True)
class ParameterTable:
    """
    Read-only algorithm catalog (AlgorithmId -> AlgorithmInfo).

    Notes:
      - `default()` loads the packaged catalog once per process.
      - `load()` is for tests and alternate catalog directories.
    """
    _algorithms: Mapping[AlgorithmId, AlgorithmInfo]
    file_hashes: Mapping[str, str]
    source: Path

    @classmethod
    def load(cls, metadata_dir: str | Path) -> "ParameterTable":
        metadata_dir = Path(metadata_dir)

        loader = CatalogLoader(metadata_dir)
        try:
            loader.load_all()
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            raise CatalogError(
                "Failed to load algorithm catalog.",
                hint=str(e),
                details={"metadata_dir": str(metadata_dir)},
            ) from None

        _log.debug("CATALOG_LOADED dir=%s algorithms=%d", metadata_dir, len(loader.algorithms))
        return cls(
            _algorithms=MappingProxyType(dict(loader.algorithms)),
            file_hashes=MappingProxyType(dict(loader.file_hashes)),
            source=metadata_dir / CatalogLoader.CATALOG_FILE,
        )

    @classmethod
    def default(cls) -> "ParameterTable":
        return _default_table()

    def catalog(self) -> Mapping[AlgorithmId, AlgorithmInfo]:
        """Return the raw AlgorithmId -> AlgorithmInfo mapping."""
        return self._algorithms

    def list(self) -> list[AlgorithmInfo]:
        """Return entries in catalog order."""
        return list(self._algorithms.values())

    def info(self, algorithm: AlgorithmId | str) -> AlgorithmInfo:
        algo = AlgorithmId.parse(algorithm)
        info = self._algorithms.get(algo)
        if info is None:
            raise UnsupportedAlgorithm(
                f"No catalog entry for algorithm '{algo.value}'.",
                hint="Run: crckit algorithms",
                details={"algorithm": algo.value},
            )
        return info

    def lookup(self, algorithm: AlgorithmId | str) -> CRCParameters:
        """CRC parameters for `algorithm`; plain checksums have none."""
        info = self.info(algorithm)
        if info.params is None:
            raise UnsupportedAlgorithm(
                f"'{info.id.value}' is not a CRC algorithm.",
                details={"algorithm": info.id.value},
            )
        return info.params


@lru_cache(maxsize=1)
def _default_table() -> ParameterTable:
    return ParameterTable.load(default_metadata_dir())


def lookup(algorithm: AlgorithmId | str) -> CRCParameters:
    return ParameterTable.default().lookup(algorithm)
