"""JSON file repository for the board."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ..config import Settings, home_data_file
from ..errors import StoreIOError, StoreParseError
from ..models import KanbanData

logger = logging.getLogger(__name__)


class BoardStore:
    """
    Repository for a board stored as a single JSON file.

    Every call opens, reads or writes, and closes the file; nothing is
    cached between calls. A missing file is seeded with the default board
    on load. A present but malformed file is an error and is never
    replaced automatically.
    """

    INDENT = 2

    def __init__(self, path: Path | None = None) -> None:
        """
        Initialize the store.

        Args:
            path: Board file location. Defaults to ``<home>/tasks.json``.

        Raises:
            ConfigurationError: If no path is given and the home directory
                cannot be determined.
        """
        self.path = path if path is not None else home_data_file()

    @classmethod
    def from_settings(cls, settings: Settings) -> BoardStore:
        """Create a store for the file configured in settings."""
        return cls(settings.resolve_data_file())

    def exists(self) -> bool:
        """Check whether the board file exists.

        Raises:
            StoreIOError: If the path cannot be inspected (e.g. permission
                denied on a parent directory, name too long).
        """
        try:
            return self.path.exists()
        except OSError as e:
            logger.warning("Failed to inspect board file %s: %s", self.path, e)
            raise StoreIOError(f"Failed to access {self.path}: {e}", self.path) from e

    def load(self) -> KanbanData:
        """Load the board from disk, seeding defaults on first run."""
        if not self.exists():
            logger.info("No board file at %s, seeding default board", self.path)
            data = KanbanData.default()
            self.save(data)
            return data

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Board file is not valid UTF-8: %s", self.path)
            raise StoreParseError(f"Invalid board file {self.path}: {e}", self.path) from e
        except OSError as e:
            logger.warning("Failed to read board file %s: %s", self.path, e)
            raise StoreIOError(f"Failed to read {self.path}: {e}", self.path) from e

        try:
            data = KanbanData.model_validate_json(content)
        except ValidationError as e:
            logger.warning("Board file does not match board shape: %s", self.path)
            raise StoreParseError(f"Invalid board file {self.path}: {e}", self.path) from e

        logger.debug("Loaded board with %d columns from %s", len(data.columns), self.path)
        return data

    def save(self, data: KanbanData) -> None:
        """Write the board to disk, replacing any existing contents."""
        content = data.model_dump_json(indent=self.INDENT) + "\n"

        try:
            self._write_atomic(content)
        except (OSError, RuntimeError) as e:  # RuntimeError: symlink loop on resolve()
            logger.warning("Failed to write board file %s: %s", self.path, e)
            raise StoreIOError(f"Failed to write {self.path}: {e}", self.path) from e

        logger.debug("Saved board with %d columns to %s", len(data.columns), self.path)

    def reset(self) -> KanbanData:
        """Overwrite the board file with the default board."""
        logger.info("Resetting board file %s to defaults", self.path)
        data = KanbanData.default()
        self.save(data)
        return data

    # --- Private Methods ---

    def _write_atomic(self, content: str) -> None:
        """
        Write via a temp file beside the real target, then rename over it.

        Symlinks are followed so the link itself survives, and the existing
        file mode is kept (new files get the umask default).
        """
        target = self.path.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _target_mode(target))
            os.replace(tmp_path, target)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise


def _target_mode(target: Path) -> int:
    """Permission bits for the written file: the existing file's, else 0o666 & ~umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
