"""Configuration."""

from .settings import DATA_FILE_NAME, Settings, home_data_file

__all__ = [
    "DATA_FILE_NAME",
    "Settings",
    "home_data_file",
]
