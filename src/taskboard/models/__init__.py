"""Data models."""

from .board import (
    COLUMN_DONE,
    COLUMN_IN_PROGRESS,
    COLUMN_TODO,
    Column,
    KanbanData,
    Task,
)
from .result import CommandResult

__all__ = [
    "COLUMN_DONE",
    "COLUMN_IN_PROGRESS",
    "COLUMN_TODO",
    "Column",
    "CommandResult",
    "KanbanData",
    "Task",
]
