# crckit/cli/commands.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from crckit.app.calculator import ChecksumCalculator
from crckit.app.config import CalculatorConfig
from crckit.engine.formatter import describe_lines, format_poly
from crckit.model.catalog import ParameterTable, default_metadata_dir


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ---------------- Logging ----------------

def configure_logging(level: int, log_file: Optional[Path] = None) -> None:
    """
    stderr logging at `level`, plus an INFO file handler when `log_file` is set
    (idempotent). Kept in CLI (presentation-layer concern).
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    root = logging.getLogger()
    for h in root.handlers:
        if type(h) is logging.StreamHandler:
            h.setLevel(level)

    effective = level
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        target = str(log_file.resolve())
        if not any(
            isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target
            for h in root.handlers
        ):
            fh = logging.FileHandler(log_file, encoding="utf-8", delay=True)
            fh.setLevel(logging.INFO)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fh)
        effective = min(level, logging.INFO)

    root.setLevel(effective)


# ---------------- Helpers ----------------

def _load_table(metadata_dir: str) -> ParameterTable:
    if Path(metadata_dir).resolve() == default_metadata_dir():
        return ParameterTable.default()
    return ParameterTable.load(metadata_dir)


def _read_input(data: list[str], stdin: TextIO) -> str:
    if data:
        return " ".join(data)
    text = stdin.read()
    for eol in ("\r\n", "\n"):
        if text.endswith(eol):
            return text[: -len(eol)]
    return text


# ---------------- Commands ----------------

def cmd_algorithms(*, metadata_dir: str, verbose: bool = False) -> int:
    table = _load_table(metadata_dir)

    if verbose:
        print(f"Catalog: {table.source}")
        for fn, digest in table.file_hashes.items():
            print(f"  {fn} sha256={digest}")
        print()

    print("Available algorithms:\n")
    for info in table.list():
        poly = f"poly=0x{format_poly(info.params)}" if info.params else "-"
        print(f"  {info.id.value:<18} {info.name:<20} width={info.width:<2} {poly}")

    print("\nUsage:")
    print("  crckit calc -a <algorithm> [-m text|hex] [-b normal|swapped] <data>")
    return 0


def cmd_describe(*, metadata_dir: str, algorithm: str) -> int:
    table = _load_table(metadata_dir)
    for line in describe_lines(table.info(algorithm)):
        print(line)
    return 0


def cmd_calc(args, *, config: CalculatorConfig, stdin: TextIO = sys.stdin) -> int:
    calc = ChecksumCalculator(config, table=_load_table(config.metadata_dir))
    view = calc.calculate(_read_input(list(args.data), stdin))

    if view.error:
        print(f"ERROR: {view.error}")
        if view.hint:
            print(f"Hint: {view.hint}")
        return 1

    if view.is_empty:
        return 0

    print(f"HEX: {view.hex}")
    print(f"BIN: {view.binary}")
    return 0
