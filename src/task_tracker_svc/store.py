"""In-memory task storage and its request dependency.

This module provides the TaskStore collection owned by the application
and the ``get_store`` dependency that hands it to route handlers.
"""

import logging
import threading
from typing import List, Optional
from uuid import UUID

from fastapi import Request

from .models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Insertion-ordered collection of tasks guarded by a single lock.

    Every method takes the lock for its whole duration, so each call is
    atomic with respect to the others. Tasks are copied on the way in and
    on the way out; callers never hold a reference to a stored record.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._lock = threading.RLock()

    def _find(self, task_id: UUID) -> Optional[Task]:
        # Caller must hold the lock
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, task: Task) -> Task:
        """Append a task and return a copy of the stored record."""
        with self._lock:
            stored = task.copy()
            self._tasks.append(stored)
            return stored.copy()

    def list_all(self) -> List[Task]:
        """Return copies of all tasks in insertion order."""
        with self._lock:
            return [task.copy() for task in self._tasks]

    def get(self, task_id: UUID) -> Optional[Task]:
        """Return a copy of the first task with ``task_id``, or None."""
        with self._lock:
            task = self._find(task_id)
            return task.copy() if task is not None else None

    def update(
        self,
        task_id: UUID,
        title: str,
        description: Optional[str],
        is_completed: bool
    ) -> Optional[Task]:
        """Overwrite the mutable fields of a stored task in place.

        Args:
            task_id: UUID of the task to update
            title: New title
            description: New description, None clears it
            is_completed: New completion flag

        Returns:
            Copy of the updated task, or None when no task has ``task_id``
        """
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            task.title = title
            task.description = description
            task.is_completed = is_completed
            return task.copy()

    def remove(self, task_id: UUID) -> bool:
        """Remove the task with ``task_id``. Returns False if it was absent."""
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return False
            self._tasks.remove(task)
            return True

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        if not isinstance(task_id, UUID):
            return False
        with self._lock:
            return self._find(task_id) is not None


def get_store(request: Request) -> TaskStore:
    """Return the TaskStore owned by the running application.

    Args:
        request: Incoming request, used to reach ``app.state``

    Returns:
        The application's TaskStore instance
    """
    return request.app.state.task_store
