"""
Context manager factory for boolean flag management.

Bindings and forms guard against re-entrant recomputation with boolean
flags. Instead of:

    self._in_validation = True
    try:
        # ... logic
    finally:
        self._in_validation = False

use:

    with FlagContextManager.manage_flags(self, _in_validation=True):
        # ... logic

Previous values are restored even when the body raises, so nested use is safe.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Set
import logging

logger = logging.getLogger(__name__)


class FormFlag(Enum):
    """
    Registry of valid re-entrancy flags.

    Add new flags here as they're introduced to the codebase.
    """
    IN_VALIDATION = '_in_validation'
    IN_COMPOSITION = '_in_composition'


class FlagContextManager:
    """
    Universal context manager for temporary boolean flags.

    Examples:
        # Single flag:
        with FlagContextManager.manage_flags(self, _in_validation=True):
            self._run_validators()

        # Convenience method for composition passes:
        with FlagContextManager.composition_context(form):
            form.content(form.scope)
    """

    VALID_FLAGS: Set[str] = {flag.value for flag in FormFlag}

    @staticmethod
    @contextmanager
    def manage_flags(obj: Any, **flags: bool):
        """
        Set flags on entry and restore previous values on exit.

        Args:
            obj: Object owning the flags (must already define each attribute)
            **flags: Flag names and values to set (e.g., _in_validation=True)

        Raises:
            ValueError: If any flag name is not in VALID_FLAGS
            AttributeError: If obj does not define one of the flags
        """
        invalid_flags = set(flags.keys()) - FlagContextManager.VALID_FLAGS
        if invalid_flags:
            raise ValueError(
                f"Invalid flags: {invalid_flags}. "
                f"Valid flags: {FlagContextManager.VALID_FLAGS}. "
                f"Add new flags to FormFlag enum."
            )

        # No getattr default: owners initialize their flags in __init__
        prev_values: Dict[str, bool] = {}
        for flag_name in flags:
            prev_values[flag_name] = getattr(obj, flag_name)

        for flag_name, flag_value in flags.items():
            setattr(obj, flag_name, flag_value)

        try:
            yield
        finally:
            for flag_name, prev_value in prev_values.items():
                setattr(obj, flag_name, prev_value)

    @staticmethod
    @contextmanager
    def composition_context(obj: Any):
        """Mark obj as composing for the duration of the block."""
        with FlagContextManager.manage_flags(obj, **{FormFlag.IN_COMPOSITION.value: True}):
            yield

    @staticmethod
    def is_flag_set(obj: Any, flag: FormFlag) -> bool:
        """
        Check if a flag is currently set to True.

        Example:
            if FlagContextManager.is_flag_set(self, FormFlag.IN_VALIDATION):
                return  # Already recomputing further up the stack
        """
        return getattr(obj, flag.value)
