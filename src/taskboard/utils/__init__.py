"""Utility functions."""

from .datetime import epoch_millis, now_utc

__all__ = [
    "epoch_millis",
    "now_utc",
]
