#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/subcommands/match.py

import argparse
import sys

from colordle.core import config as c
from colordle.shared.logger import ColordleArgumentParser
from colordle.shared.sanitizer import INPUT_HANDLERS
from colordle.logic.match.resolver import resolve_match_input


def add_database_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-db",
        "--database",
        default=None,
        help=f"CSV color list with 'name' and 'hex' columns (default: ${c.ENV_DATABASE})",
    )


def add_guess_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-g",
        "--guess",
        action="append",
        type=INPUT_HANDLERS["score_guess"],
        help=(
            "use -g COLOR:SCORE multiple times; COLOR is cyan, magenta, yellow, white,\n"
            "a hex code, or a color name from the database"
        ),
    )


def add_metric_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-dm",
        "--distance-metric",
        type=INPUT_HANDLERS["distance_metric"],
        default=c.DEFAULT_METRIC,
        choices=list(c.METRIC_LABELS),
        help=f"distance metric used for scoring (default: {c.DEFAULT_METRIC})",
    )


def get_match_parser() -> argparse.ArgumentParser:
    """Create argument parser for match command."""
    parser = ColordleArgumentParser(
        prog="colordle match",
        description="colordle match: rank database colors against similarity scores",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_database_argument(parser)
    add_guess_argument(parser)
    add_metric_argument(parser)
    parser.add_argument(
        "-n",
        "--number",
        type=INPUT_HANDLERS["limit"],
        default=c.DEFAULT_MATCH_LIMIT,
        help=f"number of candidates to show (default: {c.DEFAULT_MATCH_LIMIT}, max: {c.MAX_MATCH_LIMIT})",
    )
    return parser


def main() -> None:
    """Main entry point for match command."""
    parser = get_match_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_match_input(args)


if __name__ == "__main__":
    main()
