"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗


def _supports_color(stream) -> bool:
    """Check if a stream is a TTY that can show color."""
    return hasattr(stream, "isatty") and stream.isatty()


def _colorize(text: str, color: str, stream) -> str:
    """Apply color to text if the stream supports it."""
    if _supports_color(stream):
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN, sys.stdout)
    print(f"{check} {message}")


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    cross = _colorize(CROSS, RED, sys.stderr)
    print(f"{cross} {message}", file=sys.stderr)
