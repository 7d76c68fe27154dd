# crckit/cli/main.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from crckit.core.errors import CrcKitError

from crckit.cli.args import config_from_args, parse_args
from crckit.cli.commands import (
    cmd_algorithms,
    cmd_calc,
    cmd_describe,
    configure_logging,
)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, Path(args.log_file) if args.log_file else None)

    try:
        if args.cmd == "algorithms":
            return cmd_algorithms(metadata_dir=args.metadata_dir, verbose=args.verbose)
        if args.cmd == "describe":
            return cmd_describe(metadata_dir=args.metadata_dir, algorithm=args.algorithm)
        if args.cmd == "calc":
            return cmd_calc(args, config=config_from_args(args))

        return 2
    except CrcKitError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
