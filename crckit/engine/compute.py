# crckit/engine/compute.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from crckit.model.algorithm import CHECKSUM_WIDTH, AlgorithmId
from crckit.model.catalog import ParameterTable
from .checksums import checksum_sum, checksum_xor
from .crc import crc_bitwise
from .table import crc_table


CHECKSUMS: dict[AlgorithmId, Callable[[bytes], int]] = {
    AlgorithmId.SUM: checksum_sum,
    AlgorithmId.XOR: checksum_xor,
}


@dataclass(frozen=True, slots=True)
class ChecksumResult:
    algorithm: AlgorithmId
    raw_value: int
    byte_count: int
    width: int


class ChecksumEngine:
    """
    Stateless checksum core: (bytes, algorithm) -> ChecksumResult.

    `use_lookup_tables` switches CRCs to precomputed 256-entry tables where the
    register alignment allows it; results are identical either way.
    """

    def __init__(
        self,
        table: Optional[ParameterTable] = None,
        *,
        use_lookup_tables: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._table = table or ParameterTable.default()
        self._use_lookup_tables = bool(use_lookup_tables)
        self._log = logger or logging.getLogger(__name__)

    @property
    def table(self) -> ParameterTable:
        return self._table

    @property
    def use_lookup_tables(self) -> bool:
        return self._use_lookup_tables

    def compute(self, data: bytes, algorithm: AlgorithmId | str) -> Optional[ChecksumResult]:
        """
        Returns None for an empty byte sequence ("no result").
        Raises UnsupportedAlgorithm before any work for unknown ids.
        """
        algo = AlgorithmId.parse(algorithm)

        fn = CHECKSUMS.get(algo)
        if fn is not None:
            if not data:
                return None
            value = fn(data)
            result = ChecksumResult(algorithm=algo, raw_value=value, byte_count=1, width=CHECKSUM_WIDTH)
        else:
            params = self._table.lookup(algo)
            if not data:
                return None
            crc = crc_table if self._use_lookup_tables else crc_bitwise
            value = crc(data, params)
            result = ChecksumResult(
                algorithm=algo,
                raw_value=value,
                byte_count=params.byte_count,
                width=params.width,
            )

        self._log.debug(
            "CHECKSUM_COMPUTED algorithm=%s bytes=%d value=0x%X",
            algo.value, len(data), result.raw_value,
        )
        return result


def compute(data: bytes, algorithm: AlgorithmId | str) -> Optional[ChecksumResult]:
    return ChecksumEngine().compute(data, algorithm)
