#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096


# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MIN = 0.0                      # 8-bit color depth lower limit
RGB_MAX = 255.0                    # 8-bit color depth limit
DEG_180 = 180.0                    # Half circle degrees
DEG_360 = 360.0                    # Full circle degrees
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation
HEX_DIGITS = 6                     # Digits in an #RRGGBB code

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # XYZ is expressed on a 0..100 scale

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_POW = 1.0 / 3.0                # Cube root applied above the threshold
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# ==========================================
# Scoring & Search Constants
# ==========================================

SCORE_MAX = 100.0                  # A perfect similarity score (zero distance)
SCORE_MIN = 0.0                    # Lowest reportable similarity score
DEFAULT_METRIC = "ciede2000"       # Distance metric used for all scoring
METRIC_LABELS = {
    "ciede2000": "CIEDE2000",
    "cie76": "CIE76",
}

DEFAULT_MATCH_LIMIT = 10           # Candidates returned by the database matcher
DEFAULT_REPORT_LIMIT = 15          # Candidates per metric in the comparison report
DEFAULT_HINT_LIMIT = 100           # Remaining candidates printed by the hints command
MAX_MATCH_LIMIT = 1000             # Upper bound accepted from the command line
DEFAULT_SEARCH_LIMIT = 5           # Name matches offered for a partial color name

# Continuous solver (coordinate search over the RGB cube)
NEUTRAL_RGB = (128, 128, 128)      # Returned when no constraints are known
FIXED_START_POINTS = (
    (128.0, 128.0, 128.0),         # RGB midpoint
    (64.0, 64.0, 64.0),            # Dark gray
    (192.0, 192.0, 192.0),         # Light gray
)
STEP_SIZES = (64, 32, 16, 8, 4, 2, 1, 0.5, 0.1)  # Successive refinement step sizes

# Baseline guesses the game shows first (Source: Colordle opening board)
BASELINE_GUESSES = {
    "cyan": "#00FFFF",
    "magenta": "#FF00FF",
    "yellow": "#FFFF00",
    "white": "#FFFFFF",
}

# Fixed constraint set for the metric comparison report: (name, hex, score)
SAMPLE_CONSTRAINTS = (
    ("Cyan", "#00FFFF", 47.69),
    ("Magenta", "#FF00FF", 58.84),
    ("Yellow", "#FFFF00", 26.16),
    ("White", "#FFFFFF", 44.13),
    ("America's Cup", "#34546D", 96.35),
    ("Deep Ocean", "#2A4B5F", 94.15),
    ("Arapawa", "#274A5D", 93.21),
    ("Regatta Bay", "#2D5367", 93.20),
    ("Shadow of Night", "#2A4F61", 92.60),
    ("Deep Sea Blue", "#2A4B5A", 91.78),
)

# ==========================================
# Environment
# ==========================================

ENV_DATABASE = "COLORDLE_DATABASE"  # Default reference database path
ENV_DEBUG = "COLORDLE_DEBUG"        # Enables debug log output when set

DB_NAME_FIELD = "name"
DB_HEX_FIELD = "hex"

# ==========================================
# CLI UI
# ==========================================

# Feedback symbols used when rendering digit hints
FEEDBACK_MARKS = {
    "correct": "\033[1;30;42m",
    "present": "\033[1;30;43m",
    "absent": "\033[1;37;100m",
}

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "debug": "\033[1;35m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
    "debug": "\033[0;35m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
