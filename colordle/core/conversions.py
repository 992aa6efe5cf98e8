#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/core/conversions.py

import functools
import re
from typing import Tuple

from . import config as c
from .errors import InvalidHexError
from colordle.shared.clamping import _clamp01, _clamp255

# Optional '#', then exactly six hex digits; nothing else
HEX_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})$")


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple, raising InvalidHexError on bad input."""
    if not isinstance(hex_code, str):
        raise InvalidHexError(hex_code)
    match = HEX_PATTERN.fullmatch(hex_code)
    if not match:
        raise InvalidHexError(hex_code)
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to an uppercase '#RRGGBB' string."""
    r_clamped = int(round(_clamp255(r)))
    g_clamped = int(round(_clamp255(g)))
    b_clamped = int(round(_clamp255(b)))
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to LAB conversion."""
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_lab(x, y, z)


def hex_to_lab(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to LAB."""
    return rgb_to_lab(*hex_to_rgb(hex_code))


def normalize_hex(hex_code: str) -> str:
    """Validate a hex code and return it as '#RRGGBB' uppercase."""
    return rgb_to_hex(*hex_to_rgb(hex_code))


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
