#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/shared/clamping.py

from colordle.core import config as c


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.UNIT, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(c.RGB_MIN, min(c.RGB_MAX, v))


def clamp_rgb(r: float, g: float, b: float):
    """Clamp each channel of an RGB triple into [0, 255]."""
    return _clamp255(r), _clamp255(g), _clamp255(b)
