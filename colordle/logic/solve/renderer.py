#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/solve/renderer.py

from colordle.core import config as c
from colordle.core import conversions as conv
from colordle.shared.preview import print_color_block
from .engine import SolveResult


def render_solution(result: SolveResult, n_constraints: int) -> None:
    r, g, b = result.rgb
    hex_code = conv.rgb_to_hex(r, g, b)
    label = f"{c.MSG_BOLD_COLORS['success']}best fit{c.RESET}"
    print()
    print_color_block(hex_code, label)
    print(f"rgb({r}, {g}, {b})")
    if n_constraints:
        rms = (result.total_squared_error / n_constraints) ** 0.5
        print(f"rms score error: {rms:.4f}")
    print()
