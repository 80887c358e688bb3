"""Form state exceptions.

Two families of failures exist:

- Usage errors: defects in how a form is wired (reading a field before its
  ValidationEffect initialized it, reusing a field name with a different type).
  These are never caught internally.
- Configuration errors: validators constructed with impossible bounds. Raised
  from ``__init__`` so they never surface at validation time.

A validator returning False is not an exception; it is stored in the form's
error map.
"""


class FormStateError(Exception):
    """Base for all pyqt-formstate errors."""


class FormUsageError(FormStateError, RuntimeError):
    """Raised when a form is used in a way its wiring does not allow."""


class FieldNotInitializedError(FormUsageError):
    """Raised when a field value is read before it has been initialized."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f"Field '{field_name}' accessed before initialization. "
            f"Call validation_effect(...) for this field first."
        )


class FieldTypeMismatchError(FormUsageError, TypeError):
    """Raised when two Field handles share a name but declare different types."""

    def __init__(self, field_name: str, stored_type, requested_type):
        self.field_name = field_name
        self.stored_type = stored_type
        self.requested_type = requested_type
        super().__init__(
            f"Field '{field_name}' holds a value of declared type {_type_name(stored_type)} "
            f"but was read as {_type_name(requested_type)}. "
            f"Fields sharing a name must declare the same type."
        )


class NoActiveCompositionError(FormUsageError):
    """Raised when a composition-only call happens outside a Form pass."""


class ValidatorConfigurationError(FormStateError, ValueError):
    """Raised when a validator is constructed with invalid bounds."""


def _type_name(tp) -> str:
    return getattr(tp, "__name__", None) or repr(tp)
