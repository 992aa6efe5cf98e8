#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/shared/sanitizer.py

import argparse
import math
import re
from typing import Any, List, Optional, Sequence, Tuple

from colordle.core import config as c
from colordle.core import conversions as conv
from colordle.core.errors import ColordleError, ColorLookupError, InvalidHexError
from colordle.core.models import Constraint, DigitGuessRecord, ScoreGuess, entry_fields
from .database import find_color


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    # Regex [0-9] extracts only the numeric digits
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _parse_score(value: str) -> float:
    """
    Parses a similarity score such as '47.69' or '96.35%'. The whole text
    must be one number; anything else returns None.
    """
    if value is None:
        return None

    s = str(value).strip()
    if s.endswith("%"):
        s = s[:-1].rstrip()
    try:
        return float(s)
    except ValueError:
        return None


def _split_pair(v: str, what: str):
    """Split 'LEFT:RIGHT' (or 'LEFT=RIGHT') into two stripped parts."""
    parts = re.split(r"[:=]", str(v), maxsplit=1)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid {what}: '{raw}' (expected LEFT:RIGHT)")
    return parts[0].strip(), parts[1].strip()


def resolve_guess_color(value: str, database: Optional[Sequence[Any]] = None) -> Tuple[str, str]:
    """
    Turn a guess color into (label, '#RRGGBB').

    Baseline names (cyan, magenta, yellow, white) come first, then hex
    codes, then color names from the database when one is loaded.
    """
    text = str(value).strip()
    key = text.lower()
    if key in c.BASELINE_GUESSES:
        return key, c.BASELINE_GUESSES[key]
    try:
        hex_code = conv.normalize_hex(text)
        return hex_code, hex_code
    except InvalidHexError:
        if database is None:
            raise ColorLookupError(
                f"unknown guess color '{text}'; use cyan, magenta, yellow, white, "
                "a hex code, or a database name with -db"
            ) from None

    name, hex_code = entry_fields(find_color(database, text))
    return name, conv.normalize_hex(hex_code)


def build_constraints(guesses: Sequence[ScoreGuess], database: Optional[Sequence[Any]] = None) -> List[Constraint]:
    """Resolve every -g argument into a Constraint, in command-line order."""
    constraints = []
    for guess in guesses:
        label, hex_code = resolve_guess_color(guess.color, database)
        constraints.append(Constraint.from_hex(hex_code, guess.score, label))
    return constraints


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    try:
        return conv.normalize_hex(str(v).strip())
    except ColordleError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'") from None


def handle_score_guess(v: str) -> ScoreGuess:
    """Validator for 'COLOR:SCORE' arguments; the color is resolved once the database is loaded."""
    guess, score_text = _split_pair(v, "score constraint")
    score = _parse_score(score_text)
    if score is None:
        raise argparse.ArgumentTypeError(f"invalid score: '{_sanitize_for_log(score_text)}'")
    if not math.isfinite(score) or not c.SCORE_MIN <= score <= c.SCORE_MAX:
        raise argparse.ArgumentTypeError(f"score must be within [0, 100], got '{_sanitize_for_log(score_text)}'")
    return ScoreGuess(guess, score)


def handle_digit_guess(v: str) -> DigitGuessRecord:
    """Validator for 'HEX:FEEDBACK' arguments such as '00FFFF:ccaacc'."""
    guess, feedback = _split_pair(v, "digit guess")
    try:
        return DigitGuessRecord.parse(guess, feedback)
    except ColordleError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def handle_metric(v: str) -> str:
    """Validator for distance metric names (letters and digits only)."""
    cleaned = re.sub(r"[^0-9a-z]", "", str(v).lower())
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid metric: '{raw}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "score_guess": handle_score_guess,
    "digit_guess": handle_digit_guess,
    "distance_metric": handle_metric,
    "limit": handle_int_range(1, c.MAX_MATCH_LIMIT),
}
