"""
Contracts and configuration.

ABC-based validator contract and the global form configuration hook.
"""

from .validator import Validator, first_failing
from .form_config import FormConfig, set_form_config, get_form_config

__all__ = [
    "Validator",
    "first_failing",
    "FormConfig",
    "set_form_config",
    "get_form_config",
]
