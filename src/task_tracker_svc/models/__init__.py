"""Domain models for the task tracker service.

This package contains the in-memory task record.
"""

from .task import Task

__all__ = ["Task"]
