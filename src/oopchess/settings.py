"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

THEME_NAMES: tuple[str, ...] = ("Classic", "Contrast", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    square_size: int = 80  # px

    # Console
    unicode_glyphs: bool = False

    def __post_init__(self) -> None:
        if self.board_theme not in THEME_NAMES:
            raise ValueError(
                f"Unknown board theme {self.board_theme!r}; "
                f"choose from {', '.join(THEME_NAMES)}"
            )
        if self.square_size < 16:
            raise ValueError(f"Square size too small: {self.square_size}")
