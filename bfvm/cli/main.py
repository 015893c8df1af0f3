"""
bfvm: command-line driver.

Usage:
    bfvm <program> [--input FILE] [--tape-size N] [--check] [--config FILE] [--verbose]

Program input is read byte by byte from standard input (or --input FILE) and
program output is written raw to standard output.

Exit codes:
    0  program completed
    1  the program faulted (unmatched loop, pointer out of bounds, no input)
    2  the program or config file could not be read, or the config is invalid
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from bfvm.api.run import run_file
from bfvm.config.settings import load_config
from bfvm.io.streams import BinaryInput, BinaryOutput

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Run a program for the eight-instruction byte-tape machine.",
    )
    parser.add_argument("program", help="Program source file")
    parser.add_argument("--input", "-i", default=None,
                        help="Read program input from FILE instead of standard input")
    parser.add_argument("--tape-size", type=int, default=None,
                        help="Number of tape cells (default from config: 30000)")
    parser.add_argument("--check", action="store_true", default=None,
                        help="Reject unbalanced loop brackets before running")
    parser.add_argument("--config", default=None,
                        help="YAML config file overriding the packaged defaults")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log load and run details to stderr")
    parser.add_argument("--version", action="version", version=f"bfvm {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            overrides={"tape_size": args.tape_size, "check_loops_upfront": args.check},
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    output = BinaryOutput()
    try:
        if args.input is not None:
            with open(args.input, "rb") as f:
                report = run_file(args.program, BinaryInput(f), output, config)
        else:
            report = run_file(args.program, BinaryInput(), output, config)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if report.error is not None:
        print(report.error, file=sys.stderr)
        return 1

    print(f"\n{config.completion_message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
