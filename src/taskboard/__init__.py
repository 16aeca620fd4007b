"""Personal kanban board persisted to a JSON file."""

__version__ = "0.1.0"
