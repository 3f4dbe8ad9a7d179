"""
Logging configuration for the service.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is set, to the ``user_directory_api`` logger and to
uvicorn's logger, so application messages and uvicorn's request log
share one format and one destination.  The root logger is left alone.
"""

import logging
from pathlib import Path
from typing import Optional

SERVICE_LOGGER = "user_directory_api"
# ``uvicorn.error`` and ``uvicorn.access`` propagate to ``uvicorn``.
UVICORN_LOGGER = "uvicorn"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _find_console(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if type(handler) is logging.StreamHandler:
            return handler
    return None


def _find_file(logger: logging.Logger, path: Path) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the service and uvicorn loggers.

    Safe to call repeatedly (``create_app`` runs once per test): the
    level is always updated, handlers are only created when missing and
    are shared between the two loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.

    Returns
    -------
    logging.Logger
        The ``user_directory_api`` logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    service_logger = logging.getLogger(SERVICE_LOGGER)

    console_handler = _find_console(service_logger)
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = _find_file(service_logger, log_path)
        if file_handler is None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for logger in (service_logger, logging.getLogger(UVICORN_LOGGER)):
        logger.setLevel(numeric_level)
        for handler in handlers:
            logger.addHandler(handler)

    return service_logger
