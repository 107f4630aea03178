"""Service layer for the task tracker service.

This package contains business logic for task management operations.
"""

from .task_service import (
    create_task,
    list_tasks,
    get_task_by_id,
    update_task,
    delete_task,
    TaskNotFoundError,
    TaskValidationError
)

__all__ = [
    "create_task",
    "list_tasks",
    "get_task_by_id",
    "update_task",
    "delete_task",
    "TaskNotFoundError",
    "TaskValidationError"
]
