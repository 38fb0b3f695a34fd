"""
Logging setup for CLI commands.
"""
import logging

from wellness.core.config import settings
from wellness.core.logging_config import setup_logging


def setup_cli_logging(command: str, verbose: bool = False) -> logging.Logger:
    level = "DEBUG" if verbose else settings.log_level
    logger = setup_logging(level=level, log_file=settings.log_file)
    return logger.getChild(command)
