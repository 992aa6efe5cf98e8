#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/logic/hints/engine.py

"""
Digit feedback deduction for the hex-code guessing mode.

Each guess is six hex digits; each position comes back Correct, Present or
Absent with the same duplicate accounting as word-guessing games. A Present
or Absent verdict only speaks about the digits left over once Correct
positions have been matched.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from colordle.core import config as c
from colordle.core.models import DigitFeedback, DigitGuessRecord, entry_fields

FEEDBACK_CYCLE = (DigitFeedback.ABSENT, DigitFeedback.PRESENT, DigitFeedback.CORRECT)


def _candidate_digits(hex_code: Any) -> str:
    if not isinstance(hex_code, str):
        return ""
    digits = hex_code.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    return digits.upper()


def satisfies(candidate_hex: str, record: DigitGuessRecord) -> bool:
    """True when a target of `candidate_hex` could have produced `record`'s feedback."""
    target = _candidate_digits(candidate_hex)
    if len(target) != c.HEX_DIGITS:
        return False

    guess = record.guess_hex
    feedback = record.feedback

    for i, state in enumerate(feedback):
        if state is DigitFeedback.CORRECT and target[i] != guess[i]:
            return False

    open_positions = [i for i, state in enumerate(feedback) if state is not DigitFeedback.CORRECT]
    remaining = Counter(target[i] for i in open_positions)

    for i in open_positions:
        if feedback[i] is DigitFeedback.PRESENT:
            if remaining[guess[i]] <= 0:
                return False
            remaining[guess[i]] -= 1

    # Absent is checked only after every Present has claimed its digit
    for i in open_positions:
        if feedback[i] is DigitFeedback.ABSENT and remaining[guess[i]] > 0:
            return False

    return True


def filter_candidates(database: Sequence[Any], history: Sequence[DigitGuessRecord]) -> List[Any]:
    """Database rows consistent with every guess in `history`, in database order."""
    if not history:
        return list(database)
    return [
        entry for entry in database
        if all(satisfies(entry_fields(entry)[1], record) for record in history)
    ]


def score_guess(guess_hex: str, target_hex: str) -> Tuple[DigitFeedback, ...]:
    """The feedback the game shows for `guess_hex` when the hidden color is `target_hex`."""
    guess = DigitGuessRecord(guess_hex, (DigitFeedback.ABSENT,) * c.HEX_DIGITS).guess_hex
    target = DigitGuessRecord(target_hex, (DigitFeedback.ABSENT,) * c.HEX_DIGITS).guess_hex

    result = [DigitFeedback.ABSENT] * c.HEX_DIGITS
    unmatched = Counter()
    for i in range(c.HEX_DIGITS):
        if guess[i] == target[i]:
            result[i] = DigitFeedback.CORRECT
        else:
            unmatched[target[i]] += 1

    for i in range(c.HEX_DIGITS):
        if result[i] is DigitFeedback.CORRECT:
            continue
        if unmatched[guess[i]] > 0:
            result[i] = DigitFeedback.PRESENT
            unmatched[guess[i]] -= 1
    return tuple(result)


def cycle_feedback(feedback: Sequence[DigitFeedback], index: int) -> Tuple[DigitFeedback, ...]:
    """Return a copy of `feedback` with position `index` advanced absent -> present -> correct -> absent."""
    states = [DigitFeedback.parse(state) for state in feedback]
    current = FEEDBACK_CYCLE.index(states[index])
    states[index] = FEEDBACK_CYCLE[(current + 1) % len(FEEDBACK_CYCLE)]
    return tuple(states)


@dataclass(frozen=True)
class HintSession:
    """Snapshot of a hex-guessing game: the guesses so far and what is still possible."""

    history: Tuple[DigitGuessRecord, ...]
    remaining: Tuple[Any, ...]

    @classmethod
    def start(cls, database: Sequence[Any]) -> "HintSession":
        return cls((), tuple(database))

    def add_guess(self, record: DigitGuessRecord) -> "HintSession":
        """New snapshot with `record` appended; only the current survivors are re-checked."""
        survivors = filter_candidates(self.remaining, [record])
        return HintSession(self.history + (record,), tuple(survivors))
