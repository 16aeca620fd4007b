"""Subcommand handlers for the taskboard CLI."""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from ..models import CommandResult, KanbanData
from ..services import BoardService
from .output import error, success


def _report(result: CommandResult, message: str) -> int:
    """Print the outcome of a command and return an exit code."""
    if not result.ok:
        error(result.error or "Unknown error")
        return 1
    success(message)
    return 0


def _read_board(source: Path | None) -> KanbanData:
    """Read a board JSON document from a file or stdin."""
    content = source.read_text(encoding="utf-8") if source else sys.stdin.read()
    return KanbanData.model_validate_json(content)


def run_load(service: BoardService, args: argparse.Namespace) -> int:  # noqa: ARG001
    """Print the board as JSON."""
    result = service.load_tasks()
    if not result.ok or result.data is None:
        error(result.error or "Unknown error")
        return 1
    print(result.data.model_dump_json(indent=2))
    return 0


def run_save(service: BoardService, args: argparse.Namespace) -> int:
    """Replace the board with one read from a file or stdin."""
    try:
        board = _read_board(args.file)
    except OSError as e:
        error(f"Cannot read input: {e}")
        return 1
    except (UnicodeDecodeError, ValidationError) as e:
        error(f"Invalid board data: {e}")
        return 1
    return _report(service.save_tasks(board), "Board saved")


def run_add(service: BoardService, args: argparse.Namespace) -> int:
    result = service.add_task(args.column, args.title, args.description)
    return _report(result, f"Task added to {args.column}")


def run_edit(service: BoardService, args: argparse.Namespace) -> int:
    result = service.update_task(args.column, args.task_id, args.title, args.description)
    return _report(result, f"Task updated: {args.task_id}")


def run_move(service: BoardService, args: argparse.Namespace) -> int:
    result = service.move_task(
        args.source_column, args.source_index, args.dest_column, args.dest_index
    )
    return _report(result, f"Task moved to {args.dest_column}")


def run_delete(service: BoardService, args: argparse.Namespace) -> int:
    result = service.delete_task(args.column, args.task_id)
    return _report(result, f"Task deleted: {args.task_id}")


def run_reset(service: BoardService, args: argparse.Namespace) -> int:  # noqa: ARG001
    return _report(service.reset_board(), "Board reset to defaults")
