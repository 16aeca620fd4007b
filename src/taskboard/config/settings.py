"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..errors import ConfigurationError

DATA_FILE_NAME = "tasks.json"


def home_data_file() -> Path:
    """Get the default board file path, ``<home>/tasks.json``.

    Raises:
        ConfigurationError: If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(f"Could not determine home directory: {e}") from e

    # Older interpreters return "~" unexpanded instead of raising
    if not home.is_absolute():
        raise ConfigurationError(f"Could not determine home directory (got {home!s})")

    return home / DATA_FILE_NAME


class Settings(BaseSettings):
    """Application settings."""

    data_file: Path | None = Field(
        default=None,
        description="Path to the board JSON file (default: ~/tasks.json)",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKBOARD_",
    }

    def resolve_data_file(self) -> Path:
        """Return the configured board file, falling back to the home directory."""
        if self.data_file is not None:
            return self.data_file.expanduser()
        return home_data_file()
