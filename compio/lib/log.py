"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Usage:
- Use `LOG` for application-specific debug logging.
- The `beQuiet` flag controls whether logs are displayed.

Example:
    from compio.lib.log import LOG
    LOG("This is a debug message.")

Environment:
- Set `COMPIO_BEQUIET=false` to enable detailed logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the package
app_logger = logger.bind(app="COMPIO")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >17}</yellow>::"  # widest is compio.lib.reader
    "<cyan>{function: <14}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Application-specific logging function.

    Logs the message at debug level unless `appsettings.beQuiet` is set.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from compio.config.settings import appsettings  # Ensure up-to-date settings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
