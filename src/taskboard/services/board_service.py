"""Service exposing board commands to the UI/shell layer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ..errors import BoardStoreError
from ..models import CommandResult, KanbanData, Task
from ..repositories import BoardRepositoryProtocol

logger = logging.getLogger(__name__)


class BoardService:
    """
    Command surface over a board repository.

    Every command returns a CommandResult. Store errors are flattened to
    their message string; nothing is retried and a corrupt file is never
    replaced unless reset_board() is called explicitly.
    """

    def __init__(self, repository: BoardRepositoryProtocol) -> None:
        self.repository = repository

    def load_tasks(self) -> CommandResult:
        """Load the board (seeding defaults on first run)."""
        try:
            data = self.repository.load()
        except BoardStoreError as e:
            return CommandResult.failure(e)
        return CommandResult.success(data)

    def save_tasks(self, data: KanbanData | dict[str, Any]) -> CommandResult:
        """Persist a board, replacing the stored one.

        Accepts an already-built board or its decoded JSON form.
        """
        if not isinstance(data, KanbanData):
            try:
                data = KanbanData.model_validate(data)
            except ValidationError as e:
                logger.debug("save_tasks: rejected board payload: %s", e)
                return CommandResult.failure(f"Invalid board data: {e}")

        try:
            self.repository.save(data)
        except BoardStoreError as e:
            return CommandResult.failure(e)
        return CommandResult.success()

    def reset_board(self) -> CommandResult:
        """Replace the stored board with the default board."""
        try:
            data = self.repository.reset()
        except BoardStoreError as e:
            return CommandResult.failure(e)
        return CommandResult.success(data)

    def add_task(self, column_id: str, title: str, description: str = "") -> CommandResult:
        """Add a new task to the end of a column."""
        if not title.strip():
            return CommandResult.failure("Task title cannot be empty")

        task = Task.create(title, description)
        result = self._edit(
            lambda board: board.add_task(column_id, task),
            f"Column not found: {column_id}",
        )
        if result.ok:
            logger.info("Task added: %s -> %s", task.id, column_id)
        return result

    def update_task(
        self,
        column_id: str,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
    ) -> CommandResult:
        """Change the title and/or description of a task."""
        return self._edit(
            lambda board: board.update_task(column_id, task_id, title, description),
            f"Task not found: {task_id} in column {column_id}",
        )

    def delete_task(self, column_id: str, task_id: str) -> CommandResult:
        """Remove a task from a column."""
        result = self._edit(
            lambda board: board.remove_task(column_id, task_id),
            f"Task not found: {task_id} in column {column_id}",
        )
        if result.ok:
            logger.info("Task deleted: %s from %s", task_id, column_id)
        return result

    def move_task(
        self,
        source_column_id: str,
        source_index: int,
        dest_column_id: str,
        dest_index: int,
    ) -> CommandResult:
        """Move a task by position, as a drag-and-drop would."""
        result = self._edit(
            lambda board: board.move_task(
                source_column_id, source_index, dest_column_id, dest_index
            ),
            f"Cannot move task {source_column_id}[{source_index}] to {dest_column_id}",
        )
        if result.ok:
            logger.info(
                "Task moved: %s[%d] -> %s[%d]",
                source_column_id,
                source_index,
                dest_column_id,
                dest_index,
            )
        return result

    def _edit(self, apply: Callable[[KanbanData], object], not_found: str) -> CommandResult:
        """Load the board, apply an edit, and save it if the edit succeeded."""
        try:
            board = self.repository.load()
        except BoardStoreError as e:
            return CommandResult.failure(e)

        if not apply(board):
            logger.debug("Edit not applied: %s", not_found)
            return CommandResult.failure(not_found)

        try:
            self.repository.save(board)
        except BoardStoreError as e:
            return CommandResult.failure(e)
        return CommandResult.success(board)
