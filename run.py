"""Command-line entry point for the LS-8 virtual machine.

``run.py [program]`` loads a machine-code program written as lines of binary
digits, from the given file or from standard input when no file is given,
and runs it until it halts. PRN output goes to stdout.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pyls8.bus import DEFAULT_MEMORY_SIZE, MemoryError
from pyls8.cpu import CPUError, RegisterError
from pyls8.loader import ProgramFormatError
from pyls8.ui import AppConfig, ConsoleApp


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ls8",
        description="LS-8 eight-bit virtual machine",
    )
    parser.add_argument(
        "program",
        nargs="?",
        type=Path,
        help="Machine-code file to run (default: read from standard input)",
    )
    parser.add_argument(
        "--memory-size",
        type=int,
        default=DEFAULT_MEMORY_SIZE,
        help=f"Number of bytes of RAM (default: {DEFAULT_MEMORY_SIZE})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on undefined opcodes instead of halting",
    )
    parser.add_argument(
        "--trace",
        type=int,
        default=0,
        metavar="N",
        help="Dump the last N executed cycles to stderr after the run",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=0.0,
        metavar="SECONDS",
        help="Delay between cycles (default: run as fast as possible)",
    )
    parser.add_argument(
        "--max-cycles",
        type=int,
        metavar="N",
        help="Stop after N cycles even if the program has not halted",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.program and not args.program.exists():
        parser.error(f"Program file not found: {args.program}")
    if args.memory_size <= 0:
        parser.error("--memory-size must be positive")

    config = AppConfig(
        program_path=args.program,
        memory_size=args.memory_size,
        strict_illegal=args.strict,
        trace_limit=max(args.trace, 0),
        interval=args.interval,
        max_cycles=args.max_cycles,
    )
    app = ConsoleApp(config)
    try:
        app.run()
    except (ProgramFormatError, MemoryError, CPUError, RegisterError) as exc:
        parser.exit(1, f"ls8: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
