"""Repository protocol for board storage backends."""

from typing import Protocol

from ..models import KanbanData


class BoardRepositoryProtocol(Protocol):
    """Interface for board storage backends.

    A repository persists one whole board at a time. It keeps no board in
    memory between calls; the caller owns the loaded value.
    """

    def load(self) -> KanbanData:
        """Load the board, seeding the default board if none is stored yet.

        Raises:
            StoreIOError: The stored board cannot be read.
            StoreParseError: The stored board is malformed.
        """
        ...

    def save(self, data: KanbanData) -> None:
        """Replace the stored board with ``data``.

        Raises:
            StoreIOError: The board cannot be written.
        """
        ...

    def reset(self) -> KanbanData:
        """Overwrite the stored board with the default board and return it."""
        ...
