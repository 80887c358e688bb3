"""
Logging helpers for pyqt-formstate.

The library only emits records through module-level loggers. Applications that
want to see them can call ``configure_logging()`` once at startup.
"""

import logging
from typing import Optional

from pyqt_formstate.protocols import get_form_config

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_package_logger() -> logging.Logger:
    """Return the root logger of the library (name taken from FormConfig)."""
    return logging.getLogger(get_form_config().logger_name)


def configure_logging(level: int = logging.INFO,
                      handler: Optional[logging.Handler] = None,
                      fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach a handler to the package logger.

    Calling this again replaces the handler installed by the previous call
    instead of stacking duplicates.

    Args:
        level: Level for the package logger
        handler: Handler to install (defaults to a StreamHandler on stderr)
        fmt: Format string for the handler

    Returns:
        The configured package logger
    """
    package_logger = get_package_logger()
    for existing in list(package_logger.handlers):
        if getattr(existing, "_pyqt_formstate_handler", False):
            package_logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._pyqt_formstate_handler = True
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    logger.debug(f"Logging configured for {package_logger.name} at {logging.getLevelName(level)}")
    return package_logger
