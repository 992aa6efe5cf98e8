#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/subcommands/solve.py

import argparse
import sys

from colordle.core import config as c
from colordle.shared.logger import ColordleArgumentParser
from colordle.shared.sanitizer import INPUT_HANDLERS
from colordle.logic.solve.resolver import resolve_solve_input
from .match import add_guess_argument, add_metric_argument


def get_solve_parser() -> argparse.ArgumentParser:
    """Create argument parser for solve command."""
    parser = ColordleArgumentParser(
        prog="colordle solve",
        description="colordle solve: search the full RGB cube for the color that best fits the scores",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_guess_argument(parser)
    add_metric_argument(parser)
    parser.add_argument(
        "-db",
        "--database",
        default=None,
        help="optional CSV color list; also rank its entries against the scores",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=INPUT_HANDLERS["limit"],
        default=c.DEFAULT_MATCH_LIMIT,
        help=f"number of database candidates to show (default: {c.DEFAULT_MATCH_LIMIT})",
    )
    return parser


def main() -> None:
    """Main entry point for solve command."""
    parser = get_solve_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_solve_input(args)


if __name__ == "__main__":
    main()
