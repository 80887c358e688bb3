"""
pyqt-formstate: reactive form state and validation for PyQt6.

Keeps form values, dirtiness and validation errors in one store and
re-validates fields as their values change, independently of the widgets
that display them.

Architecture:
- Core: Field handles (name-keyed, typed) and logging helpers
- Protocols: Validator ABC and global FormConfig
- Validators: text, numeric, equality and selection rules
- Services: field change dispatch and re-entrancy flags
- Forms: FormState, FormScope, ValidationBinding, Composition, Form

Example:
    EMAIL = Field.text("email")

    def body(scope):
        form_field(scope, EMAIL, "", [RequiredValidator("email is required"),
                                      EmailValidator("must be a valid email address")])

    form = Form(on_submit=lambda scope: print(scope.value(EMAIL)), content=body)
    form.compose()
    form.scope.set_value(EMAIL, "a@b.co")
    form.scope.submit()
"""

from __future__ import annotations

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "Field": ("pyqt_formstate.core", "Field"),
    "configure_logging": ("pyqt_formstate.core", "configure_logging"),
    "Validator": ("pyqt_formstate.protocols", "Validator"),
    "FormConfig": ("pyqt_formstate.protocols", "FormConfig"),
    "set_form_config": ("pyqt_formstate.protocols", "set_form_config"),
    "get_form_config": ("pyqt_formstate.protocols", "get_form_config"),
    "FormState": ("pyqt_formstate.forms", "FormState"),
    "FormScope": ("pyqt_formstate.forms", "FormScope"),
    "Form": ("pyqt_formstate.forms", "Form"),
    "ValidationBinding": ("pyqt_formstate.forms", "ValidationBinding"),
    "validation_effect": ("pyqt_formstate.forms", "validation_effect"),
    "form_field": ("pyqt_formstate.forms", "form_field"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    *_EXPORTS.keys(),
]
