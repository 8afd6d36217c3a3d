from collections.abc import Iterable

from intake.logging.logger import Log
from intake.pipeline.models import SubmittedFile, Task, TaskStatus, TaskView


class TaskQueue:
    """Insertion-ordered tasks, one per accepted file; tasks are never removed."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._ids: set[str] = set()

    def submit(self, files: Iterable[SubmittedFile]) -> list[Task]:
        """Append a queued task per file, skipping ids already present.

        Returns:
            The tasks actually added, in arrival order.
        """
        added: list[Task] = []
        for file in files:
            if file.task_id in self._ids:
                Log.info(f"Ignoring duplicate submission {file.task_id}")
                continue
            task = Task(file=file)
            self._tasks.append(task)
            self._ids.add(task.id)
            added.append(task)
        return added

    def next_queued(self) -> Task | None:
        """Earliest-inserted task still queued."""
        for task in self._tasks:
            if task.status is TaskStatus.QUEUED:
                return task
        return None

    @property
    def all_terminal(self) -> bool:
        return bool(self._tasks) and all(task.status.is_terminal for task in self._tasks)

    def views(self) -> tuple[TaskView, ...]:
        return tuple(task.view() for task in self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
