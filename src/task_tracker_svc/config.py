"""Environment-driven configuration for the task tracker service.

Values are read from the process environment, with a local ``.env`` file
loaded first when present.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings snapshot taken from the environment."""

    def __init__(self):
        self.service_name: str = "task_tracker_svc"
        self.service_version: str = "1.0.0"
        self.host: str = os.getenv("SERVICE_HOST", "0.0.0.0")
        self.port: int = int(os.getenv("SERVICE_PORT", 8000))
        self.api_prefix: str = os.getenv("API_PREFIX", "/api/v1").rstrip("/")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.environment: str = os.getenv("ENVIRONMENT", "production").lower()
        self.enable_docs: bool = _env_flag("ENABLE_DOCS")

    @property
    def tasks_path(self) -> str:
        """Base path of the task routes, e.g. ``/api/v1/tasks``."""
        return f"{self.api_prefix}/tasks"

    @property
    def docs_enabled(self) -> bool:
        """Interactive API docs are served in development or when forced on."""
        return self.enable_docs or self.environment == "development"


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
