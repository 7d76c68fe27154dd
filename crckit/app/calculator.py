# crckit/app/calculator.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from crckit.app.config import CalculatorConfig
from crckit.codec.decoder import InputMode, decode
from crckit.core.errors import DecodeError, UnsupportedAlgorithm
from crckit.engine.compute import ChecksumEngine, ChecksumResult
from crckit.engine.formatter import ByteOrder, format_binary, format_hex
from crckit.model.algorithm import AlgorithmId
from crckit.model.catalog import ParameterTable, default_metadata_dir


@dataclass(frozen=True, slots=True)
class CalculationView:
    """
    What the presentation layer shows for one set of inputs.
    Empty strings mean "no result"; `error` is a user-visible message.
    """
    hex: str = ""
    binary: str = ""
    error: Optional[str] = None
    hint: Optional[str] = None
    result: Optional[ChecksumResult] = None

    @property
    def is_empty(self) -> bool:
        return not self.hex and not self.binary and self.error is None


EMPTY_VIEW = CalculationView()


class ChecksumCalculator:
    """
    Presentation-facing boundary: decode -> compute -> format.

    Every call recomputes from scratch; inputs not passed explicitly fall back
    to the config defaults. Decode and algorithm errors are turned into an
    error view and never propagate.
    """

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        *,
        table: Optional[ParameterTable] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config or CalculatorConfig()
        self._log = logger or logging.getLogger(__name__)

        if table is None:
            if Path(self._config.metadata_dir).resolve() == default_metadata_dir():
                table = ParameterTable.default()
            else:
                table = ParameterTable.load(self._config.metadata_dir)

        self._engine = ChecksumEngine(
            table,
            use_lookup_tables=self._config.use_lookup_tables,
            logger=self._log,
        )

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def engine(self) -> ChecksumEngine:
        return self._engine

    def reset(self) -> CalculationView:
        return EMPTY_VIEW

    def calculate(
        self,
        text: str,
        *,
        mode: InputMode | str | None = None,
        algorithm: AlgorithmId | str | None = None,
        byte_order: ByteOrder | str | None = None,
    ) -> CalculationView:
        if not text:
            return EMPTY_VIEW

        cfg = self._config
        try:
            mode = InputMode.parse(mode if mode is not None else cfg.input_mode)
            order = ByteOrder.parse(byte_order if byte_order is not None else cfg.byte_order)
        except ValueError as e:
            self._log.warning("INVALID_OPTION err=%s", e)
            return CalculationView(error=str(e))

        try:
            data = decode(text, mode)
        except DecodeError as e:
            self._log.warning("DECODE_FAILED mode=%s err=%s", mode.value, e.message)
            return CalculationView(error=f"Invalid input format: {e.message}", hint=e.hint)

        if not data:
            return EMPTY_VIEW

        algo = algorithm if algorithm is not None else cfg.algorithm
        try:
            result = self._engine.compute(data, algo)
        except UnsupportedAlgorithm as e:
            self._log.warning("UNSUPPORTED_ALGORITHM algorithm=%s", algo)
            return CalculationView(error=f"Unsupported algorithm '{algo}'", hint=e.hint or e.message)

        if result is None:
            return EMPTY_VIEW

        return CalculationView(
            hex=format_hex(result.raw_value, result.byte_count, order),
            binary=format_binary(result.raw_value, result.width),
            result=result,
        )
