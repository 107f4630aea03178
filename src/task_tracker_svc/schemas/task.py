"""Pydantic schemas for task-related operations.

This module defines the input and output schemas for task operations.
Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

TASK_EXAMPLE = {
    "id": "d3b9f0f5-e2c1-4a7e-a2cf-72e578a6e7df",
    "title": "Buy groceries",
    "description": "Milk, Bread, Eggs",
    "isCompleted": False
}

ANOTHER_TASK_EXAMPLE = {
    "id": "5a1e2b3f-6c4d-7890-1234-abcdefabcdef",
    "title": "Finish assignment",
    "description": "Complete the Swagger/OpenAPI docs task",
    "isCompleted": True
}

_INPUT_EXAMPLE = {key: value for key, value in TASK_EXAMPLE.items() if key != "id"}


class TaskInput(BaseModel):
    """Fields a client may supply for a task.

    Title presence is checked by the service layer, which answers blank
    titles with a plain-text 400. Unknown keys, including a
    client-supplied ``id``, are ignored.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": _INPUT_EXAMPLE}
    )

    title: Optional[str] = Field("", description="Task title (required, non-blank)")
    description: Optional[str] = Field(None, description="Optional task description")
    is_completed: bool = Field(False, alias="isCompleted", description="Whether the task is done")


class TaskCreate(TaskInput):
    """Input schema for creating a new task."""
    pass


class TaskUpdate(TaskInput):
    """Input schema for replacing the mutable fields of a task.

    Every field is replaced; an omitted description clears it and an
    omitted completion flag resets it to False.
    """
    pass


class TaskResponse(BaseModel):
    """Output schema for task responses."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": TASK_EXAMPLE}
    )

    id: str = Field(..., description="Unique task identifier (UUID as string)")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    is_completed: bool = Field(False, alias="isCompleted", description="Whether the task is done")
