"""CLI entry point for taskboard."""

import argparse
import logging
from pathlib import Path

from . import __version__
from .cli import commands
from .cli.output import error
from .config import Settings
from .errors import ConfigurationError
from .logging import setup_logging
from .repositories import BoardStore
from .services import BoardService

logger = logging.getLogger(__name__)

HANDLERS = {
    "load": commands.run_load,
    "save": commands.run_save,
    "add": commands.run_add,
    "edit": commands.run_edit,
    "move": commands.run_move,
    "delete": commands.run_delete,
    "reset": commands.run_reset,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="Personal kanban board stored in a JSON file",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Path to the board file (default: ~/tasks.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("load", help="Print the board as JSON (seeds defaults on first run)")

    save = sub.add_parser("save", help="Replace the board with JSON from a file or stdin")
    save.add_argument("file", nargs="?", type=Path, default=None)

    add = sub.add_parser("add", help="Add a task to a column")
    add.add_argument("column")
    add.add_argument("title")
    add.add_argument("-d", "--description", default="")

    edit = sub.add_parser("edit", help="Change a task's title or description")
    edit.add_argument("column")
    edit.add_argument("task_id")
    edit.add_argument("--title", default=None)
    edit.add_argument("--description", default=None)

    move = sub.add_parser("move", help="Move a task by position")
    move.add_argument("source_column")
    move.add_argument("source_index", type=int)
    move.add_argument("dest_column")
    move.add_argument("dest_index", type=int)

    delete = sub.add_parser("delete", help="Delete a task from a column")
    delete.add_argument("column")
    delete.add_argument("task_id")

    sub.add_parser("reset", help="Overwrite the board with the default board")
    sub.add_parser("path", help="Print the board file path")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.data_file:
        settings_kwargs["data_file"] = args.data_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    try:
        store = BoardStore.from_settings(settings)
    except ConfigurationError as e:
        error(str(e))
        raise SystemExit(2) from e

    if args.command == "path":
        print(store.path)
        raise SystemExit(0)

    logger.debug("Running %s against %s", args.command, store.path)
    exit_code = HANDLERS[args.command](BoardService(store), args)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
