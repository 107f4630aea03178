"""In-memory task tracking service exposed over a FastAPI REST API."""

__version__ = "1.0.0"
