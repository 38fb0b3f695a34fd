"""
Logging setup and helpers shared by the services.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional, Union

from rich.logging import RichHandler

LOGGER_NAME = "wellness"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the package logger with a console handler and an optional file."""
    logger.setLevel(level.upper())
    logger.handlers.clear()

    console = RichHandler(show_path=False, rich_tracebacks=True)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def _with_context(message: str, context: dict[str, Any]) -> str:
    if not context:
        return message
    details = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} | {details}"


def log_info(message: str, **context: Any) -> None:
    logger.info(_with_context(message, context))


def log_warning(message: str, **context: Any) -> None:
    logger.warning(_with_context(message, context))


def log_error(error: Union[BaseException, str], **context: Any) -> None:
    """Log an error; exceptions keep their traceback."""
    if isinstance(error, BaseException):
        logger.error(
            _with_context(f"{type(error).__name__}: {error}", context),
            exc_info=error,
        )
    else:
        logger.error(_with_context(error, context))
