#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colordle/core/errors.py


class ColordleError(Exception):
    """Base class for every error raised by colordle."""


class InvalidHexError(ColordleError, ValueError):
    """A hex code is not exactly six hexadecimal digits (optional '#')."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid hex code: '{value}'")


class InvalidConstraintError(ColordleError, ValueError):
    """A score constraint has an unusable guess color or score."""


class InvalidGuessError(ColordleError, ValueError):
    """A digit guess record does not hold six digits and six feedback states."""


class EmptyConstraintsError(ColordleError, ValueError):
    """Scoring was asked to fit a candidate against no constraints at all."""


class DatabaseError(ColordleError):
    """The reference color database could not be read."""


class ColorLookupError(ColordleError, LookupError):
    """A color name matched no database entry, or more than one."""
