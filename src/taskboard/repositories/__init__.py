"""Repository layer for data access."""

from .filesystem import BoardStore
from .protocol import BoardRepositoryProtocol

__all__ = [
    "BoardRepositoryProtocol",
    "BoardStore",
]
