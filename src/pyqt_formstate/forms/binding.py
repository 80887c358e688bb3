"""
Validation binding - keeps one field initialized, dirty-tracked and validated.

``validation_effect(scope, field, default, validators)`` is called from a Form
body on every composition pass. The first call creates a ``ValidationBinding``
for the field; later calls hand it the (possibly new) default and validators.

A recomputation does three things, in order:

1. If the field holds no value yet (first pass, or after a reset), write the
   default. This happens before any read, so reading never hits an
   uninitialized field.
2. If the value differs from the default and the field is not dirty yet,
   mark it dirty.
3. If the value or the validator sequence changed since the last run, evaluate
   the validators in order and store the first failing message as the
   field's error (or clear it).

Besides composition passes, a binding recomputes whenever its field's value
changes in the FormState, so ``scope.set_value()`` is immediately reflected in
dirtiness and errors.
"""

import logging
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar

from pyqt_formstate.core.field import Field
from pyqt_formstate.forms.composition import current_composition
from pyqt_formstate.forms.form_scope import FormScope
from pyqt_formstate.protocols import Validator, first_failing, get_form_config
from pyqt_formstate.services import FieldChangeEvent, FlagContextManager, FormFlag

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class ValidationBinding:
    """
    Reactive validation for a single field of one form.

    Usable without a Form (e.g. from a test harness or a hand-written update
    loop)::

        binding = ValidationBinding(scope, EMAIL)
        binding.update("", [RequiredValidator("email is required")])
        scope.set_value(EMAIL, "x")   # binding recomputes through the dispatcher

    Call ``dispose()`` when the field leaves the form.
    """

    def __init__(self, scope: FormScope, field: Field[T]):
        self._scope = scope
        self._field = field
        self._default: Any = _UNSET
        self._validators: Tuple[Validator[T], ...] = ()
        self._last_seen: Optional[Tuple[Any, Tuple[Validator[T], ...]]] = None
        self._in_validation = False
        self._disposed = False

        scope.state.dispatcher.subscribe(field.name, self._on_value_changed)

    @property
    def field(self) -> Field[T]:
        return self._field

    @property
    def validators(self) -> Tuple[Validator[T], ...]:
        return self._validators

    def update(self, default: T, validators: Sequence[Validator[T]]) -> None:
        """Record this pass's default and validators, then recompute."""
        self._default = default
        self._validators = tuple(validators)
        self.recompute()

    def revalidate(self) -> None:
        """Forget the last-seen inputs and recompute, re-running every validator."""
        self._last_seen = None
        self.recompute()

    def recompute(self) -> None:
        """Initialize, dirty-track and validate the field (see module docstring)."""
        if self._disposed or self._default is _UNSET:
            return
        # Writes below re-enter through the dispatcher
        if FlagContextManager.is_flag_set(self, FormFlag.IN_VALIDATION):
            return

        with FlagContextManager.manage_flags(self, _in_validation=True):
            scope = self._scope
            field = self._field

            if not scope.is_initialized(field):
                # First pass or after a reset: validators must see the default
                self._last_seen = None
                scope.set_value(field, self._default)

            value = scope.value(field)
            if value != self._default and not scope.is_dirty(field):
                scope.mark_as_dirty(field)

            inputs = (value, self._validators)
            if inputs == self._last_seen:
                return

            failing = first_failing(self._validators, value)
            message = failing.error_message if failing is not None else None
            if get_form_config().debug_validation:
                logger.info(f"VALIDATE: {field.name} = {repr(value)[:50]} -> {message!r}")
            scope.set_error(field, message)
            self._last_seen = inputs

    def dispose(self) -> None:
        """Stop listening to the form. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        self._scope.state.dispatcher.unsubscribe(self._field.name, self._on_value_changed)

    def _on_value_changed(self, event: FieldChangeEvent) -> None:
        self.recompute()


def validation_effect(scope: FormScope, field: Field[T], default: T,
                      validators: Sequence[Validator[T]] = ()) -> ValidationBinding:
    """
    Attach validation for field to the current composition pass.

    Must be called from a Form body. The binding is remembered across passes
    under the field's name and disposed once a pass no longer attaches it.

    Args:
        scope: The FormScope handed to the body
        field: The field to initialize and validate
        default: Value applied on first initialization and after a reset
        validators: Evaluated in order; the first failure becomes the field's error

    Raises:
        NoActiveCompositionError: If called outside Form.compose()
    """
    composition = current_composition()
    binding = composition.remember(
        ("validation", field.name),
        lambda: ValidationBinding(scope, field),
    )
    binding.update(default, validators)
    return binding


def form_field(scope: FormScope, field: Field[T], default: T,
               validators: Sequence[Validator[T]] = (),
               content: Optional[Callable[[], None]] = None) -> ValidationBinding:
    """
    Attach validation for field, then build its content.

    Guarantees initialization, dirty tracking and validation are in place
    before the content reads ``scope.value(field)``::

        form_field(scope, EMAIL, "", [EmailValidator("invalid email")],
                   lambda: email_edit.setText(scope.value(EMAIL)))
    """
    binding = validation_effect(scope, field, default, validators)
    if content is not None:
        content()
    return binding


# Names used by declarative-UI code ported to this library
ValidationEffect = validation_effect
FormField = form_field
