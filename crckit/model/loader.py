# crckit/model/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import yaml

from crckit.core.errors import UnsupportedAlgorithm
from crckit.utils.hashing import sha256_file
from .algorithm import AlgorithmId, AlgorithmInfo, CRCParameters


CRC_FIELDS = ("width", "poly", "init", "xor_out", "ref_in", "ref_out")


class CatalogLoader:
    """
    Loads the algorithm catalog from YAML into strongly-typed model classes.

    Loads:
        - algorithms.yml

    After calling load_all(), exposes:
        self.algorithms  : dict[AlgorithmId, AlgorithmInfo]  (catalog order)
        self.file_hashes : dict[str, str]  (filename -> sha256)

    The catalog must be exhaustive: every AlgorithmId has exactly one entry.
    """

    CATALOG_FILE = "algorithms.yml"

    def __init__(self, config_dir: str | Path):
        self.config_dir = Path(config_dir)
        self.algorithms: Dict[AlgorithmId, AlgorithmInfo] = {}
        self.file_hashes: Dict[str, str] = {}

    # ---------------------------------------------------------------------
    # YAML utility
    # ---------------------------------------------------------------------
    def _load_yaml(self, filename: str) -> dict:
        full_path = self.config_dir / filename
        if not full_path.exists():
            raise FileNotFoundError(f"Missing catalog file: {full_path}")

        with open(full_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    # ---------------------------------------------------------------------
    # Public entry point
    # ---------------------------------------------------------------------
    def load_all(self) -> None:
        """Load the catalog + compute its file hash."""
        self.algorithms.clear()
        self.file_hashes.clear()

        data = self._load_yaml(self.CATALOG_FILE)
        self.file_hashes[self.CATALOG_FILE] = sha256_file(self.config_dir / self.CATALOG_FILE)

        self._load_algorithms(data)

    # ---------------------------------------------------------------------
    # Algorithms
    # ---------------------------------------------------------------------
    def _load_algorithms(self, data: dict) -> None:
        entries = data.get("algorithms") if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise ValueError(f"{self.CATALOG_FILE} is missing 'algorithms' root node")

        for key, ainfo in entries.items():
            try:
                algo = AlgorithmId.parse(str(key))
            except UnsupportedAlgorithm:
                raise ValueError(f"Unknown algorithm id '{key}' in {self.CATALOG_FILE}") from None

            if algo in self.algorithms:
                raise ValueError(f"Duplicate entry for algorithm '{algo.value}'")

            if not isinstance(ainfo, dict):
                raise ValueError(f"Algorithm '{key}' entry must be a mapping")

            name = ainfo.get("name")
            if not name:
                raise ValueError(f"Algorithm '{key}' is missing 'name'")

            self.algorithms[algo] = AlgorithmInfo(
                id=algo,
                name=str(name),
                description=str(ainfo.get("description", "")),
                params=self._parse_params(algo, ainfo),
            )

        missing = [a.value for a in AlgorithmId if a not in self.algorithms]
        if missing:
            raise ValueError(f"{self.CATALOG_FILE} has no entry for: {', '.join(missing)}")

    def _parse_params(self, algo: AlgorithmId, ainfo: dict) -> Optional[CRCParameters]:
        present = [f for f in CRC_FIELDS if f in ainfo]

        if not algo.is_crc:
            if present:
                raise ValueError(f"Checksum '{algo.value}' must not define CRC fields {present}")
            return None

        absent = [f for f in CRC_FIELDS if f not in ainfo]
        if absent:
            raise ValueError(f"CRC '{algo.value}' is missing fields {absent}")

        for f in ("ref_in", "ref_out"):
            if not isinstance(ainfo[f], bool):
                raise ValueError(f"CRC '{algo.value}' '{f}' must be true/false")

        try:
            return CRCParameters(
                width=ainfo["width"],
                poly=ainfo["poly"],
                init=ainfo["init"],
                xor_out=ainfo["xor_out"],
                ref_in=ainfo["ref_in"],
                ref_out=ainfo["ref_out"],
            )
        except ValueError as e:
            raise ValueError(f"CRC '{algo.value}': {e}") from e
