"""Task service layer for business logic over the in-memory store.

This module implements task creation, retrieval, update and deletion
with title validation and logging around every store operation.
"""

import logging
import uuid
from typing import Dict, Any, Optional, List
from uuid import UUID

from ..models.task import Task
from ..schemas.task import TaskCreate, TaskUpdate
from ..store import TaskStore

logger = logging.getLogger(__name__)

TITLE_REQUIRED_MESSAGE = "Title is required."


class TaskNotFoundError(ValueError):
    """Exception raised when a task with the specified ID is not found."""
    pass


class TaskValidationError(ValueError):
    """Exception raised when task input fails validation."""
    pass


def _validate_title(title: Optional[str]) -> str:
    """Return the title unchanged if it has visible content."""
    if title is None or not title.strip():
        raise TaskValidationError(TITLE_REQUIRED_MESSAGE)
    return title


def create_task(payload: TaskCreate, store: TaskStore) -> Dict[str, Any]:
    """Create a new task with a server-generated ID.

    Args:
        payload: TaskCreate Pydantic model with the client's fields
        store: TaskStore receiving the new task

    Returns:
        Dictionary representation of the created task

    Raises:
        TaskValidationError: When title is missing, empty or whitespace only
    """
    logger.info(f"Creating task with title: {payload.title!r}")

    title = _validate_title(payload.title)

    task = Task(
        id=uuid.uuid4(),
        title=title,
        description=payload.description,
        is_completed=payload.is_completed
    )

    try:
        created = store.add(task)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    logger.info(f"Successfully created task with ID: {created.id}")
    return created.to_dict()


def list_tasks(store: TaskStore) -> List[Dict[str, Any]]:
    """List every task in insertion order.

    Args:
        store: TaskStore to read from

    Returns:
        List of task dictionaries, empty when the store is empty
    """
    logger.info("Listing all tasks")

    try:
        tasks = store.list_all()
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    task_dicts = [task.to_dict() for task in tasks]
    logger.info(f"Successfully retrieved {len(task_dicts)} tasks")
    return task_dicts


def get_task_by_id(store: TaskStore, task_id: UUID) -> Optional[Dict[str, Any]]:
    """Retrieve a task by its UUID.

    Args:
        store: TaskStore to read from
        task_id: UUID of the task to retrieve

    Returns:
        Dictionary representation of the task if found, None otherwise
    """
    logger.info(f"Retrieving task with ID: {task_id}")

    try:
        task = store.get(task_id)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    if task is None:
        logger.info(f"Task with ID {task_id} not found")
        return None

    logger.info(f"Successfully retrieved task with ID: {task_id}")
    return task.to_dict()


def update_task(task_id: UUID, payload: TaskUpdate, store: TaskStore) -> Dict[str, Any]:
    """Replace the title, description and completion flag of a task.

    The existence check runs before validation, so an unknown ID is
    reported as not found even when the payload is also invalid. A
    rejected payload leaves the stored task untouched.

    @param task_id (UUID): The unique identifier of the task to be updated
    @param payload (TaskUpdate): Full set of new field values
    @param store (TaskStore): Store holding the task
    @returns (Dict[str, Any]): Dictionary representation of the updated task
    @raises TaskNotFoundError: When no task with the specified task_id exists
    @raises TaskValidationError: When the new title is missing, empty or
                                 whitespace only
    """
    logger.info(f"Updating task with ID: {task_id}")

    try:
        existing = store.get(task_id)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    if existing is None:
        raise TaskNotFoundError(f"Task with ID {task_id} not found")

    title = _validate_title(payload.title)

    try:
        task = store.update(
            task_id,
            title=title,
            description=payload.description,
            is_completed=payload.is_completed
        )
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    # Deleted between the lookup and the write
    if task is None:
        raise TaskNotFoundError(f"Task with ID {task_id} not found")

    logger.info(f"Successfully updated task with ID: {task_id}")
    return task.to_dict()


def delete_task(task_id: UUID, store: TaskStore) -> None:
    """Permanently remove a task.

    Args:
        task_id: UUID of the task to delete
        store: TaskStore holding the task

    Raises:
        TaskNotFoundError: When no task with the specified task_id is found
    """
    logger.info(f"Deleting task with ID: {task_id}")

    try:
        removed = store.remove(task_id)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    if not removed:
        raise TaskNotFoundError(f"Task with ID {task_id} not found")

    logger.info(f"Successfully deleted task with ID: {task_id}")
