"""Deduce the hidden Colordle color from similarity scores or hex-digit hints."""

__version__ = "0.1.0"
