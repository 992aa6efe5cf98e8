#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/subcommands/hints.py

import argparse
import sys

from colordle.core import config as c
from colordle.shared.logger import ColordleArgumentParser
from colordle.shared.sanitizer import INPUT_HANDLERS
from colordle.logic.hints.resolver import resolve_hints_input
from .match import add_database_argument


def get_hints_parser() -> argparse.ArgumentParser:
    """Create argument parser for hints command."""
    parser = ColordleArgumentParser(
        prog="colordle hints",
        description=(
            "colordle hints: narrow the database with per-digit hex feedback\n"
            "feedback letters: c/g = correct, p/y = present, a/x/- = absent"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_database_argument(parser)
    parser.add_argument(
        "-G",
        "--guess",
        action="append",
        type=INPUT_HANDLERS["digit_guess"],
        help="use -G HEX:FEEDBACK multiple times, e.g. -G 00FFFF:ccaacc",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=INPUT_HANDLERS["limit"],
        default=c.DEFAULT_HINT_LIMIT,
        help=f"number of remaining colors to list (default: {c.DEFAULT_HINT_LIMIT})",
    )
    return parser


def main() -> None:
    """Main entry point for hints command."""
    parser = get_hints_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_hints_input(args)


if __name__ == "__main__":
    main()
