from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from app.configs.settings import settings

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


def file_logger(logger: Logger) -> Logger:
    """
    Attach the shared JSON file handler to a logger.

    The handler is only added when ``LOG_TO_FILE`` is enabled and only once
    per logger, so calling this at import time in many modules is safe.

    Args:
        logger: Logger to configure.

    Returns:
        Logger: The same logger, for chaining.
    """
    logger.setLevel(settings.LOG_LEVEL)
    if not settings.LOG_TO_FILE:
        return logger

    log_path = Path(settings.LOG_FILE)
    if any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_path.resolve()
        for h in logger.handlers
    ):
        return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"),
    )
    logger.addHandler(handler)
    return logger
