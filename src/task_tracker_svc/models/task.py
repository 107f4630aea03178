"""Task record held by the in-memory store.

This module defines the Task model with its identifier generation
and dictionary serialization.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any


@dataclass
class Task:
    """A single tracked task.

    The ``id`` is assigned once at construction and never changes. The
    remaining fields are replaced wholesale by updates.
    """
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def copy(self) -> "Task":
        """Return a detached copy of this task."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Task instance to a dictionary for serialization.

        Returns:
            Dict with the wire field names; the UUID is converted to its
            canonical string form.
        """
        return {
            'id': str(self.id),
            'title': self.title,
            'description': self.description,
            'isCompleted': self.is_completed
        }

    def __repr__(self):
        """String representation of the Task object."""
        return f"<Task(id={self.id}, title='{self.title}', is_completed={self.is_completed})>"
