"""Command-line front door for dirpick.

Parses CLI options, merges them with the persisted config, and runs the
interactive browser. Prints the shell hand-off line after a normal exit.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import DirpickError, format_error
from .log import configure_logging, get_logger
from .runtime import run_browser
from .runtime.config import load_open_selection, load_theme_name
from .shell import shell_handoff_line
from .ui_theme import available_theme_names

LOG_LEVELS = ("debug", "info", "warning", "error")

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories in two panes and print a cd line for the chosen one."
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to start in. Defaults to the current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Do not open selections with the default application.",
    )
    parser.add_argument("--log-level", default="warning", choices=LOG_LEVELS, help="Logging threshold.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to FILE instead of stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    Fatal errors exit with status 1 after the terminal has been restored.
    """
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)

    start_dir = Path(args.path)
    if not start_dir.is_dir():
        raise SystemExit(f"Not a directory: {start_dir}")

    theme_name = args.theme if args.theme is not None else load_theme_name()
    open_selection = not args.no_open and load_open_selection()
    try:
        state = run_browser(
            start_dir,
            theme_name=theme_name,
            no_color=args.no_color,
            open_selection=open_selection,
        )
    except (DirpickError, OSError, EOFError) as exc:
        logger.debug("browser stopped: %r", exc)
        raise SystemExit(f"dirpick: {format_error(exc)}") from exc

    line = shell_handoff_line(state)
    if line is not None:
        sys.stdout.write(line + "\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
