"""Exceptions raised for malformed coordinates."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Coordinate text that does not name a square, e.g. ``"z9"``."""


class InvalidPosition(ValueError):
    """A row or column outside the 0–7 range."""
