"""Run the task tracker service with uvicorn."""

import logging

import uvicorn

from .config import configure_logging, get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name} on {settings.host}:{settings.port}")
    uvicorn.run(
        "task_tracker_svc.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
