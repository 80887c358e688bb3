"""FormScope - accessor facade over a FormState."""

import logging
from typing import Callable, Optional, Set, TypeVar

from pyqt_formstate.core.field import Field
from pyqt_formstate.forms.form_state import FormState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FormScope:
    """
    Read/write access to field values and errors, plus the submit/reset lifecycle.

    Created by ``Form`` and handed to both the form body and the submit
    callback. A scope holds no state of its own beyond the FormState it wraps
    and the submit callback, and must not outlive that state.

    Typical body usage::

        def body(scope):
            form_field(scope, EMAIL, "", [RequiredValidator("email is required")])
            email_input.setText(scope.value(EMAIL))
            email_error.setText(scope.error(EMAIL) or "")
    """

    def __init__(self, state: FormState, on_submit: Callable[['FormScope'], None]):
        self._state = state
        self._on_submit = on_submit

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def fields(self) -> Set[Field]:
        """Handles for every field currently holding a value, with their stored type tags."""
        return {Field(name, self._state.declared_type(name)) for name in self._state.field_names}

    # ========== FIELD VALUES ==========

    def is_initialized(self, field: Field) -> bool:
        """True if the field holds a value."""
        return self._state.has_value(field.name)

    def value(self, field: Field[T]) -> T:
        """
        Current value of field.

        Fields are initialized with their default through ``validation_effect``.

        Raises:
            FieldNotInitializedError: If read before initialization
            FieldTypeMismatchError: If another handle with the same name but a
                different declared type wrote the value
        """
        return self._state.get_value(field)

    def set_value(self, field: Field[T], value: T) -> None:
        """
        Assign a new value.

        The field's binding re-runs its validators and marks the field dirty
        once the value differs from its default.
        """
        self._state.set_value(field, value)

    def __getitem__(self, field: Field[T]) -> T:
        return self.value(field)

    def __setitem__(self, field: Field[T], value: T) -> None:
        self.set_value(field, value)

    # ========== DIRTINESS ==========

    def is_dirty(self, field: Field) -> bool:
        """True if field has been modified since it was initialized or last reset."""
        return self._state.is_field_dirty(field.name)

    def mark_as_dirty(self, field: Field) -> None:
        """
        Mark field as interacted with.

        Fields are marked automatically when their value diverges from the
        default; call this for custom interaction flows (e.g. focus lost).
        """
        self._state.mark_dirty(field.name)

    # ========== ERRORS ==========

    def error(self, field: Field) -> Optional[str]:
        """
        Visible validation error for field, or None.

        Only returned once the field is dirty and the form shows errors, so
        untouched inputs are not flagged prematurely.
        """
        if self.is_dirty(field) and self._state.should_show_errors:
            return self._state.error_for(field.name)
        return None

    def set_error(self, field: Field, message: Optional[str]) -> None:
        """
        Store or clear an error directly, bypassing validators.

        Meant for externally sourced errors such as a server-side uniqueness
        check. The next validator run for this field overwrites it.
        """
        self._state.set_error(field.name, message)

    def is_field_valid(self, field: Field) -> bool:
        """True when errors are hidden or field has no visible error."""
        return not self._state.should_show_errors or self.error(field) is None

    # ========== FORM LEVEL ==========

    @property
    def is_valid(self) -> bool:
        return self._state.is_valid

    @property
    def should_show_errors(self) -> bool:
        return self._state.should_show_errors

    @should_show_errors.setter
    def should_show_errors(self, value: bool) -> None:
        self._state.should_show_errors = value

    def submit(self, on_invalid: Optional[Callable[[], None]] = None) -> bool:
        """
        Show errors and attempt submission.

        Every known field is marked dirty and error visibility is forced on.
        If the form is then valid the submit callback runs, otherwise
        on_invalid (if provided) does.

        Returns:
            True if the submit callback ran
        """
        for name in self._state.field_names:
            self._state.mark_dirty(name)
        self._state.should_show_errors = True

        if self._state.is_valid:
            logger.info(f"Form submitted ({len(self._state.field_names)} field(s))")
            self._on_submit(self)
            return True

        logger.info(f"Form submission blocked by {len(self._state.errors)} error(s)")
        if on_invalid is not None:
            on_invalid()
        return False

    def reset(self) -> None:
        """See FormState.reset()."""
        self._state.reset()
