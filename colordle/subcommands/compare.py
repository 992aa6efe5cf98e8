#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/subcommands/compare.py

import argparse
import sys

from colordle.core import config as c
from colordle.shared.logger import ColordleArgumentParser
from colordle.shared.sanitizer import INPUT_HANDLERS
from colordle.logic.compare.resolver import resolve_compare_input
from .match import add_database_argument, add_guess_argument


def get_compare_parser() -> argparse.ArgumentParser:
    """Create argument parser for compare command."""
    parser = ColordleArgumentParser(
        prog="colordle compare",
        description=(
            "colordle compare: rank the database under CIEDE2000 and CIE76 side by side\n"
            "without -g, a built-in sample set of ten scores is used"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_database_argument(parser)
    add_guess_argument(parser)
    parser.add_argument(
        "-n",
        "--number",
        type=INPUT_HANDLERS["limit"],
        default=c.DEFAULT_REPORT_LIMIT,
        help=f"candidates per metric (default: {c.DEFAULT_REPORT_LIMIT})",
    )
    return parser


def main() -> None:
    """Main entry point for compare command."""
    parser = get_compare_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_compare_input(args)


if __name__ == "__main__":
    main()
