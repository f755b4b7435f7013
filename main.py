"""CLI entrypoint for the crossword grid editor."""

from __future__ import annotations

import argparse

from crossword_editor.core.config import FRONTENDS, EditorConfig
from crossword_editor.core.exceptions import InvalidDimensionsError
from crossword_editor.io.console import ConsoleView
from crossword_editor.utils.logger import configure_logging, get_logger


LOGGER = get_logger(__name__)


def build_parser(defaults: EditorConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Edit a crossword grid from the terminal or a window",
    )
    parser.add_argument(
        "--frontend",
        type=str,
        choices=FRONTENDS,
        default=defaults.frontend,
        help="User interface to start (default: %(default)s)",
    )
    parser.add_argument("--rows", type=int, help="Grid height in squares (prompted if omitted)")
    parser.add_argument("--cols", type=int, help="Grid width in squares (prompted if omitted)")
    parser.add_argument(
        "--squares-per-inch",
        type=int,
        help="Display density for the gui frontend (prompted if omitted)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    defaults = EditorConfig.from_env()
    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    config = EditorConfig(
        frontend=args.frontend,
        height=args.rows,
        width=args.cols,
        squares_per_inch=args.squares_per_inch,
        log_level=args.log_level.upper(),
    )
    try:
        config.validate()
    except (InvalidDimensionsError, ValueError) as exc:
        parser.error(str(exc))
    configure_logging(config.log_level)
    LOGGER.debug("Starting %s frontend", config.frontend)

    if config.frontend == "gui":
        from crossword_editor.io.gui import CrosswordGUI

        CrosswordGUI(config).run()
    else:
        ConsoleView().run(config.height, config.width)


if __name__ == "__main__":  # pragma: no cover
    main()
