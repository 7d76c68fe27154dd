# crckit/cli/args.py
from __future__ import annotations

import argparse
import logging
from typing import Optional

from crckit.app.config import CalculatorConfig
from crckit.codec.decoder import InputMode
from crckit.engine.formatter import ByteOrder


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULTS = CalculatorConfig()


def _log_level(v: str) -> int:
    s = str(v).strip().upper()
    if s not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"Invalid log level '{v}' (use: {', '.join(LOG_LEVELS)})")
    return getattr(logging, s)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crckit", description="Checksum / CRC calculator")
    parser.add_argument("--log-level", type=_log_level, default=logging.WARNING,
                        help="stderr log level (default: WARNING)")
    parser.add_argument("--log-file", default=None, help="also append INFO+ logs to this file")
    parser.add_argument("--metadata-dir", default=DEFAULTS.metadata_dir,
                        help="directory holding algorithms.yml (default: packaged catalog)")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_list = sub.add_parser("algorithms", help="list supported algorithms")
    p_list.add_argument("--verbose", action="store_true", help="also show catalog path and sha256")

    p_desc = sub.add_parser("describe", help="show the parameter model of one algorithm")
    p_desc.add_argument("algorithm")

    p_calc = sub.add_parser("calc", help="compute a checksum")
    p_calc.add_argument("data", nargs="*",
                        help="input data (joined with spaces); read from stdin when omitted")
    p_calc.add_argument("-a", "--algorithm", default=DEFAULTS.algorithm,
                        help=f"algorithm id (default: {DEFAULTS.algorithm}; see: crckit algorithms)")
    p_calc.add_argument("-m", "--mode", default=DEFAULTS.input_mode,
                        choices=[m.value for m in InputMode],
                        help=f"input mode (default: {DEFAULTS.input_mode})")
    p_calc.add_argument("-b", "--byte-order", default=DEFAULTS.byte_order,
                        choices=[o.value for o in ByteOrder],
                        help=f"result byte order (default: {DEFAULTS.byte_order})")
    p_calc.add_argument("--lookup-tables", action="store_true",
                        help="use precomputed 256-entry CRC tables")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> CalculatorConfig:
    return CalculatorConfig(
        metadata_dir=str(args.metadata_dir),
        algorithm=str(getattr(args, "algorithm", DEFAULTS.algorithm)),
        input_mode=str(getattr(args, "mode", DEFAULTS.input_mode)),
        byte_order=str(getattr(args, "byte_order", DEFAULTS.byte_order)),
        use_lookup_tables=bool(getattr(args, "lookup_tables", False)),
    )
