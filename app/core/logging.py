import logging
import sys

from app.core.config import Settings

LOG_LINE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_INITIALIZED = False


def setup_logging(settings: Settings) -> None:
    """Route the app and uvicorn loggers through a single stdout handler."""
    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_LINE_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.LOG_LEVEL.upper())

    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        log = logging.getLogger(logger_name)
        log.handlers = [handler]
        log.propagate = False

    _LOGGING_INITIALIZED = True
