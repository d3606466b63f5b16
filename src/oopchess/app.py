"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from oopchess.settings import THEME_NAMES, AppSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player chess")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Play in a Qt window")
    mode.add_argument("--console", action="store_true", help="Play on the console")
    parser.add_argument(
        "--theme", choices=THEME_NAMES, default="Classic", help="Board colour theme"
    )
    parser.add_argument(
        "--unicode", action="store_true", help="Use chess glyphs on the console"
    )
    parser.add_argument(
        "--no-coordinates", action="store_true", help="Hide board coordinates"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _ask_gui_mode() -> bool:
    try:
        choice = input("Start game in GUI mode? (y/n): ")
    except EOFError:
        return False
    return choice.strip().lower() == "y"


def main(argv: list[str] | None = None) -> int:
    """Launch a game in the chosen front end."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = AppSettings(
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
        unicode_glyphs=args.unicode,
    )

    use_gui = args.gui or (not args.console and _ask_gui_mode())
    if use_gui:
        from oopchess.ui.bootstrap import run_application

        return run_application(settings)

    from oopchess.console import run_console
    from oopchess.ui.glyphs import piece_glyph

    run_console(glyph=piece_glyph if settings.unicode_glyphs else None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
