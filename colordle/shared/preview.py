#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/shared/preview.py

import re

from colordle.core.conversions import hex_to_rgb
from colordle.core import config as c

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    r, g, b = hex_to_rgb(hex_code)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 24 - vis_len)
    hex_text = hex_code if hex_code.startswith("#") else f"#{hex_code}"

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{hex_text.upper()}{c.RESET}", end=end)
