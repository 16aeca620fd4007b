"""Board domain models."""

from __future__ import annotations

from pydantic import BaseModel

from ..utils import epoch_millis

# Column IDs of the default board
COLUMN_TODO = "todo"
COLUMN_IN_PROGRESS = "in-progress"
COLUMN_DONE = "done"


class Task(BaseModel):
    """A single card on the board."""

    id: str  # caller-assigned, e.g. "task-1" or "task-1718000000000"
    title: str
    description: str

    @classmethod
    def create(cls, title: str, description: str = "") -> Task:
        """Create a task with a timestamp-based ID."""
        return cls(id=f"task-{epoch_millis()}", title=title, description=description)


class Column(BaseModel):
    """A column holding tasks in display order."""

    id: str
    title: str
    tasks: list[Task]

    def index_of(self, task_id: str) -> int:
        """Get position of a task in this column, or -1 if not found."""
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return -1


class KanbanData(BaseModel):
    """The full board: columns in display order."""

    columns: list[Column]

    @classmethod
    def default(cls) -> KanbanData:
        """Create the board written on first run."""
        return cls(
            columns=[
                Column(
                    id=COLUMN_TODO,
                    title="To Do",
                    tasks=[
                        Task(
                            id="task-1",
                            title="Learn Tauri",
                            description="Learn how to build apps with Tauri",
                        ),
                        Task(
                            id="task-2",
                            title="Build Kanban App",
                            description="Create a Kanban board application",
                        ),
                    ],
                ),
                Column(
                    id=COLUMN_IN_PROGRESS,
                    title="In Progress",
                    tasks=[
                        Task(
                            id="task-3",
                            title="Implement Drag and Drop",
                            description="Add drag and drop functionality",
                        ),
                    ],
                ),
                Column(
                    id=COLUMN_DONE,
                    title="Done",
                    tasks=[
                        Task(
                            id="task-4",
                            title="Set up Project",
                            description="Initialize Tauri project with React",
                        ),
                    ],
                ),
            ]
        )

    def get_column(self, column_id: str) -> Column | None:
        """Get a column by ID."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def find_task(self, task_id: str) -> tuple[Column, int] | None:
        """Find the first column containing a task, with its position."""
        for column in self.columns:
            idx = column.index_of(task_id)
            if idx >= 0:
                return column, idx
        return None

    def add_task(self, column_id: str, task: Task) -> bool:
        """Append a task to the end of a column.

        Returns:
            True if the column exists and the task was added.
        """
        column = self.get_column(column_id)
        if column is None:
            return False
        column.tasks.append(task)
        return True

    def update_task(
        self,
        column_id: str,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
    ) -> Task | None:
        """Replace the title and/or description of a task in place."""
        column = self.get_column(column_id)
        if column is None:
            return None

        idx = column.index_of(task_id)
        if idx < 0:
            return None

        task = column.tasks[idx]
        if title is not None:
            task.title = title
        if description is not None:
            task.description = description
        return task

    def remove_task(self, column_id: str, task_id: str) -> bool:
        """Remove every task with the given ID from a column.

        Returns:
            True if at least one task was removed.
        """
        column = self.get_column(column_id)
        if column is None:
            return False

        remaining = [t for t in column.tasks if t.id != task_id]
        removed = len(remaining) != len(column.tasks)
        column.tasks = remaining
        return removed

    def move_task(
        self,
        source_column_id: str,
        source_index: int,
        dest_column_id: str,
        dest_index: int,
    ) -> Task | None:
        """
        Move a task between (or within) columns by position.

        The task is removed from the source position first, then inserted at
        dest_index in the destination column. Insertion follows list.insert
        semantics, so an index past the end appends.

        Returns:
            The moved task, or None if a column is unknown or the source
            index is out of range.
        """
        source = self.get_column(source_column_id)
        dest = self.get_column(dest_column_id)
        if source is None or dest is None:
            return None
        if source_index < 0 or source_index >= len(source.tasks):
            return None

        task = source.tasks.pop(source_index)
        dest.tasks.insert(max(dest_index, 0), task)
        return task
