"""Result model for the command surface."""

from __future__ import annotations

from pydantic import BaseModel

from .board import KanbanData


class CommandResult(BaseModel):
    """Outcome of a board command.

    Errors are flattened to a human-readable string; no error codes are
    exposed to callers.
    """

    ok: bool
    data: KanbanData | None = None
    error: str | None = None

    @classmethod
    def success(cls, data: KanbanData | None = None) -> CommandResult:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str | Exception) -> CommandResult:
        return cls(ok=False, error=str(error))
