#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/core/models.py

"""Immutable records passed between the colordle engines."""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Optional, Sequence, Tuple, Union

from . import config as c
from . import conversions as conv
from .errors import InvalidConstraintError, InvalidGuessError

RGB = Tuple[int, int, int]

GUESS_PATTERN = re.compile(r"^[0-9A-F]{6}$")


class DatabaseEntry(NamedTuple):
    """One raw row of the reference database; hex is not validated."""

    name: str
    hex: str


class ScoreGuess(NamedTuple):
    """A `-g COLOR:SCORE` argument whose color is not looked up yet."""

    color: str
    score: float


def entry_fields(entry: Any) -> Tuple[str, Any]:
    """Return (name, hex) from a DatabaseEntry, any object with those attributes, or a mapping."""
    if isinstance(entry, Mapping):
        return entry.get(c.DB_NAME_FIELD, ""), entry.get(c.DB_HEX_FIELD)
    return getattr(entry, c.DB_NAME_FIELD, ""), getattr(entry, c.DB_HEX_FIELD, None)


@dataclass(frozen=True)
class Color:
    name: str
    hex: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", conv.normalize_hex(self.hex))

    @classmethod
    def from_rgb(cls, name: str, r: float, g: float, b: float) -> "Color":
        return cls(name, conv.rgb_to_hex(r, g, b))

    @property
    def rgb(self) -> RGB:
        return conv.hex_to_rgb(self.hex)

    @property
    def lab(self) -> Tuple[float, float, float]:
        return conv.rgb_to_lab(*self.rgb)


@dataclass(frozen=True)
class Constraint:
    """
    "The target's similarity to guess_rgb was reported as reported_score%".

    Scores must be finite and inside [0, 100]; channels inside [0, 255].
    """

    guess_rgb: RGB
    reported_score: float
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        try:
            rgb = tuple(self.guess_rgb)
        except TypeError:
            raise InvalidConstraintError(f"guess color must be an (r, g, b) triple, got {self.guess_rgb!r}") from None
        if len(rgb) != 3:
            raise InvalidConstraintError(f"guess color must be an (r, g, b) triple, got {self.guess_rgb!r}")
        for channel in rgb:
            if isinstance(channel, bool) or not isinstance(channel, (int, float)):
                raise InvalidConstraintError(f"guess channel is not a number: {channel!r}")
            if not c.RGB_MIN <= channel <= c.RGB_MAX:
                raise InvalidConstraintError(f"guess channel out of range [0, 255]: {channel!r}")

        try:
            score = float(self.reported_score)
        except (TypeError, ValueError):
            raise InvalidConstraintError(f"score is not a number: {self.reported_score!r}") from None
        if not math.isfinite(score) or not c.SCORE_MIN <= score <= c.SCORE_MAX:
            raise InvalidConstraintError(f"score must be within [0, 100], got {self.reported_score!r}")

        object.__setattr__(self, "guess_rgb", rgb)
        object.__setattr__(self, "reported_score", score)

    @classmethod
    def from_hex(cls, hex_code: str, reported_score: float, name: str = "") -> "Constraint":
        return cls(conv.hex_to_rgb(hex_code), reported_score, name)

    @property
    def target_distance(self) -> float:
        return c.SCORE_MAX - self.reported_score

    @property
    def guess_lab(self) -> Tuple[float, float, float]:
        return conv.rgb_to_lab(*self.guess_rgb)


@dataclass(frozen=True)
class CandidateMatch:
    """
    A scored database row. `color` is None when the row's hex could not be
    parsed; such rows carry an infinite error and zero confidence.
    """

    entry: Any
    color: Optional[Color]
    total_squared_error: float
    average_error: float
    confidence: float

    @classmethod
    def from_error(cls, entry: Any, color: Optional[Color], total_squared_error: float,
                   n_constraints: int) -> "CandidateMatch":
        average_error = math.sqrt(total_squared_error / n_constraints)
        confidence = max(0.0, c.SCORE_MAX - average_error)
        return cls(entry, color, total_squared_error, average_error, confidence)

    @property
    def name(self) -> str:
        return entry_fields(self.entry)[0]

    @property
    def hex(self) -> str:
        if self.color is not None:
            return self.color.hex
        return str(entry_fields(self.entry)[1])

    @property
    def rgb(self) -> Optional[RGB]:
        return self.color.rgb if self.color is not None else None


class DigitFeedback(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @classmethod
    def parse(cls, value: Union[str, "DigitFeedback"]) -> "DigitFeedback":
        """Accept an enum member, its name, or a one-letter code (c/g, p/y, a/x/-)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _FEEDBACK_ALIASES:
            return _FEEDBACK_ALIASES[key]
        raise InvalidGuessError(f"unknown feedback state: '{value}'")


_FEEDBACK_ALIASES = {
    "correct": DigitFeedback.CORRECT, "c": DigitFeedback.CORRECT, "g": DigitFeedback.CORRECT,
    "present": DigitFeedback.PRESENT, "p": DigitFeedback.PRESENT, "y": DigitFeedback.PRESENT,
    "absent": DigitFeedback.ABSENT, "a": DigitFeedback.ABSENT, "x": DigitFeedback.ABSENT,
    "-": DigitFeedback.ABSENT,
}


@dataclass(frozen=True)
class DigitGuessRecord:
    guess_hex: str
    feedback: Tuple[DigitFeedback, ...]

    def __post_init__(self) -> None:
        guess = str(self.guess_hex).strip().lstrip("#").upper()
        if not GUESS_PATTERN.match(guess):
            raise InvalidGuessError(f"guess must be six hex digits, got '{self.guess_hex}'")
        feedback = tuple(DigitFeedback.parse(state) for state in self.feedback)
        if len(feedback) != c.HEX_DIGITS:
            raise InvalidGuessError(f"expected {c.HEX_DIGITS} feedback states, got {len(feedback)}")
        object.__setattr__(self, "guess_hex", guess)
        object.__setattr__(self, "feedback", feedback)

    @classmethod
    def parse(cls, guess_hex: str, feedback: Union[str, Sequence[Union[str, DigitFeedback]]]) -> "DigitGuessRecord":
        """Build a record from compact text, e.g. parse("00FFFF", "ccaacc")."""
        if isinstance(feedback, str):
            feedback = list(feedback.strip())
        return cls(guess_hex, tuple(feedback))
