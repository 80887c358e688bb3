"""
Form state and reactive validation.

FormState (the store), FormScope (accessors and lifecycle), ValidationBinding
(per-field reactive validation), Composition (pass-to-pass memoization) and
Form (the container tying them together).
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_state import FormState
    from .form_scope import FormScope
    from .composition import Composition, current_composition
    from .binding import (
        ValidationBinding,
        validation_effect,
        form_field,
        ValidationEffect,
        FormField,
    )
    from .form import Form

_EXPORTS = {
    "FormState": ("pyqt_formstate.forms.form_state", "FormState"),
    "FormScope": ("pyqt_formstate.forms.form_scope", "FormScope"),
    "Composition": ("pyqt_formstate.forms.composition", "Composition"),
    "current_composition": ("pyqt_formstate.forms.composition", "current_composition"),
    "ValidationBinding": ("pyqt_formstate.forms.binding", "ValidationBinding"),
    "validation_effect": ("pyqt_formstate.forms.binding", "validation_effect"),
    "form_field": ("pyqt_formstate.forms.binding", "form_field"),
    "ValidationEffect": ("pyqt_formstate.forms.binding", "ValidationEffect"),
    "FormField": ("pyqt_formstate.forms.binding", "FormField"),
    "Form": ("pyqt_formstate.forms.form", "Form"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
