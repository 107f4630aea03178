"""Pydantic schemas for the task tracker service.

This package contains all Pydantic models for request/response validation
and serialization.
"""

from .task import TaskCreate, TaskResponse, TaskUpdate

__all__ = ["TaskCreate", "TaskResponse", "TaskUpdate"]
