"""Base configuration for form state behavior.

Provides hooks for applications to customize how forms validate, recompose
and log.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class FormConfig:
    """Configuration for form state behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        show_errors_initially: Initial error visibility of new FormState instances
        recompose_on_change: Whether a Form re-runs its body when a field value
            changes or the form is reset outside a composition pass
        max_recompose_passes: Upper bound on follow-up passes scheduled by
            writes made during a single Form.compose() call
        debug_validation: Verbose logging of dispatch and validation runs
        logger_name: Name of the package logger used by configure_logging()
    """

    show_errors_initially: bool = False
    recompose_on_change: bool = True
    max_recompose_passes: int = 8
    debug_validation: bool = False
    logger_name: str = "pyqt_formstate"


# Global config instance (set by application)
_form_config: Optional[FormConfig] = None


def set_form_config(config: Optional[FormConfig]) -> None:
    """Set the global form configuration.

    Args:
        config: FormConfig instance, or None to restore the defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormConfig:
    """Get the current form configuration.

    Returns:
        Current FormConfig or default if not set
    """
    if _form_config is None:
        return FormConfig()
    return _form_config
