#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/hints/renderer.py

from typing import Any, Sequence

from colordle.core import config as c
from colordle.core.errors import InvalidHexError
from colordle.core.models import DigitGuessRecord, entry_fields
from colordle.shared.preview import print_color_block


def format_record(record: DigitGuessRecord) -> str:
    """One guess as six colored tiles, word-game style."""
    tiles = [
        f"{c.FEEDBACK_MARKS[state.value]} {digit} {c.RESET}"
        for digit, state in zip(record.guess_hex, record.feedback)
    ]
    return "".join(tiles)


def render_hints(history: Sequence[DigitGuessRecord], remaining: Sequence[Any], limit: int) -> None:
    print()
    for record in history:
        print(format_record(record))
    print()

    header = f"possible colors ({len(remaining)})"
    print(f"{c.MSG_BOLD_COLORS['info']}{header}{c.RESET}")
    for entry in remaining[:limit]:
        name, hex_code = entry_fields(entry)
        try:
            print_color_block(hex_code, name)
        except InvalidHexError:
            print(f"{name}  {hex_code}")
    if len(remaining) > limit:
        print(f"{c.MSG_COLORS['info']}... and {len(remaining) - limit} more{c.RESET}")
    print()
