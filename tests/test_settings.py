"""Tests for AppSettings validation."""

import pytest

from oopchess.settings import AppSettings


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.board_theme == "Classic"
    assert settings.show_coordinates
    assert not settings.unicode_glyphs


def test_unknown_theme_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown board theme"):
        AppSettings(board_theme="Purple")


def test_tiny_squares_rejected() -> None:
    with pytest.raises(ValueError, match="too small"):
        AppSettings(square_size=8)
