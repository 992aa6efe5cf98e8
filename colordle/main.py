#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/main.py

import argparse
import sys

from colordle import __version__
from colordle.subcommands.command_registry import SUBCOMMANDS
from colordle.shared.logger import log, ColordleArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser; the real work happens in subcommands."""
    parser = ColordleArgumentParser(
        prog="colordle",
        description=(
            "colordle: deduce the hidden Colordle color from your feedback\n\n"
            "commands:\n"
            "  match     rank database colors against similarity scores\n"
            "  solve     best-fit color anywhere in the RGB cube\n"
            "  hints     filter the database with per-digit hex feedback\n"
            "  compare   CIEDE2000 vs CIE76 ranking report"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"colordle {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command: '{args.command}'")
    else:
        log("error", f"a command is required: {', '.join(SUBCOMMANDS)}")
    sys.exit(2)


def main() -> None:
    """Main entry point for colordle CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args, parser)


if __name__ == "__main__":
    main()
