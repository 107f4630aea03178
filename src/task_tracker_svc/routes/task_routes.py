"""FastAPI routes for task-related operations.

This module implements REST API endpoints for task management including
creation, retrieval, updating, and deletion operations.
"""

import logging
from uuid import UUID
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse

from ..schemas.task import TaskCreate, TaskUpdate, TaskResponse, TASK_EXAMPLE, ANOTHER_TASK_EXAMPLE
from ..services.task_service import (
    create_task,
    list_tasks,
    get_task_by_id,
    update_task,
    delete_task,
    TaskNotFoundError,
    TaskValidationError
)
from ..store import TaskStore, get_store

logger = logging.getLogger(__name__)

# Create API router
task_router = APIRouter(tags=["Tasks API"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"description": "Task not found"}}
BAD_REQUEST_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {
        "description": "Invalid input",
        "content": {"text/plain": {"example": "Title is required."}}
    }
}


def _internal_error(e: Exception) -> HTTPException:
    logger.error(e, exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error"
    )


# The collection answers on the bare prefix; the trailing-slash form is an
# undocumented alias so neither variant is redirected.
@task_router.post(
    "/",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False
)
@task_router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    description="Creates a new task with a unique ID.",
    response_description="Task created successfully.",
    responses=BAD_REQUEST_RESPONSE
)
def create_task_endpoint(
    payload: TaskCreate,
    request: Request,
    response: Response,
    store: TaskStore = Depends(get_store)
):
    """Create a task and point the Location header at it.

    Args:
        payload: Client-supplied task fields; any ``id`` is ignored
        request: Incoming request, used to build the Location path
        response: Outgoing response, receives the Location header
        store: Application task store

    Returns:
        The created task with HTTP 201
    """
    logger.info("POST /tasks request")

    try:
        task = create_task(payload, store)
    except TaskValidationError as e:
        logger.warning(f"Rejected task creation: {e}")
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        raise _internal_error(e)

    response.headers["Location"] = request.app.url_path_for("get_task", task_id=task["id"])
    return task


@task_router.get("/", response_model=List[TaskResponse], include_in_schema=False)
@task_router.get(
    "",
    response_model=List[TaskResponse],
    summary="Retrieve all tasks",
    description="Returns a list of all existing tasks.",
    response_description="List of tasks",
    responses={
        status.HTTP_200_OK: {
            "content": {"application/json": {"example": [TASK_EXAMPLE, ANOTHER_TASK_EXAMPLE]}}
        }
    }
)
def list_tasks_endpoint(store: TaskStore = Depends(get_store)):
    """Return every task in the store."""
    logger.info("GET /tasks request")

    try:
        return list_tasks(store)
    except Exception as e:
        raise _internal_error(e)


@task_router.get(
    "/{task_id}",
    name="get_task",
    response_model=TaskResponse,
    summary="Get a task by ID",
    description="Returns a specific task by its ID.",
    response_description="Task found",
    responses=NOT_FOUND_RESPONSE
)
def get_task_endpoint(task_id: UUID, store: TaskStore = Depends(get_store)):
    """Return one task, or an empty 404 when the ID is unknown."""
    logger.info(f"GET /tasks/{task_id} request")

    try:
        task = get_task_by_id(store, task_id)
    except Exception as e:
        raise _internal_error(e)

    if task is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return task


@task_router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update an existing task",
    description="Updates a task with the specified ID.",
    response_description="Updated task",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE}
)
def update_task_endpoint(
    task_id: UUID,
    payload: TaskUpdate,
    store: TaskStore = Depends(get_store)
):
    """Replace the mutable fields of a task.

    Args:
        task_id: UUID of the task to update
        payload: New title, description and completion flag
        store: Application task store

    Returns:
        The updated task, an empty 404 for an unknown ID, or a plain-text
        400 when the title is blank
    """
    logger.info(f"PUT /tasks/{task_id} request")

    try:
        return update_task(task_id, payload, store)
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except TaskValidationError as e:
        logger.warning(f"Rejected update for task {task_id}: {e}")
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        raise _internal_error(e)


@task_router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    description="Deletes a task by its unique ID.",
    response_description="Task deleted",
    responses=NOT_FOUND_RESPONSE
)
def delete_task_endpoint(task_id: UUID, store: TaskStore = Depends(get_store)):
    """Delete a task by ID.

    Raises:
        HTTPException: 500 for unexpected errors
    """
    logger.info(f"DELETE /tasks/{task_id} request")

    try:
        delete_task(task_id, store)
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except Exception as e:
        raise _internal_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
