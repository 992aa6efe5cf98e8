#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/match/renderer.py

from typing import List, Sequence

from colordle.core import config as c
from colordle.core import conversions as conv
from colordle.core.models import CandidateMatch, Constraint
from colordle.shared.preview import print_color_block


def render_constraints(constraints: Sequence[Constraint]) -> None:
    for cons in constraints:
        hex_code = conv.rgb_to_hex(*cons.guess_rgb)
        label = cons.name or hex_code
        print_color_block(hex_code, label, end="")
        print(f"  ({cons.reported_score:.2f}%)")


def render_matches(matches: List[CandidateMatch]) -> None:
    """Print ranked candidates, the best one first."""
    print()
    for i, match in enumerate(matches):
        label = f"{c.MSG_BOLD_COLORS['info']}{i + 1:>2}.{c.RESET} {match.name}"
        if match.color is None:
            print(f"{label}  {c.MSG_COLORS['warning']}{match.hex} (unreadable hex){c.RESET}")
            continue
        print_color_block(match.hex, label, end="")
        print(f"  ({match.confidence:.2f}%  rms {match.average_error:.4f})")
    print()
