"""
Service layer for form state.

Cross-cutting helpers for change routing and re-entrancy guards.
"""

from .flag_context_manager import FlagContextManager, FormFlag
from .field_change_dispatcher import FieldChangeDispatcher, FieldChangeEvent

__all__ = [
    "FlagContextManager",
    "FormFlag",
    "FieldChangeDispatcher",
    "FieldChangeEvent",
]
