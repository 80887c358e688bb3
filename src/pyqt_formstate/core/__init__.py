"""
Core building blocks.

Field handles and logging helpers. No dependency on the form store.
"""

from .field import Field
from .log_utils import configure_logging, get_package_logger

__all__ = [
    "Field",
    "configure_logging",
    "get_package_logger",
]
