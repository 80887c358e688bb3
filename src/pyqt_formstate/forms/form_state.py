"""FormState - single source of truth for form values, dirtiness and errors."""

import copy
import logging
from typing import Any, Callable, Dict, FrozenSet, List, NamedTuple, Optional, Set, TypeVar

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_formstate.core.field import Field
from pyqt_formstate.exceptions import FieldNotInitializedError, FieldTypeMismatchError
from pyqt_formstate.protocols import get_form_config
from pyqt_formstate.services import FieldChangeDispatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Entry(NamedTuple):
    """Stored value tagged with the declared type of the handle that wrote it."""
    value_type: Any
    value: Any


class FormState(QObject):
    """
    Holds field values, validation errors and error visibility for one form.

    Can be created next to the form or hoisted by the owner to survive the
    form being rebuilt (e.g. navigating away and back).

    Storage is keyed by field *name*: every ``Field`` handle sharing a name
    reads and writes the same entry. Each entry remembers the declared type of
    the handle that wrote it, and a read through a handle declaring another
    type raises ``FieldTypeMismatchError``.

    Values are shallow-copied on write and on read. Editing a list obtained
    from ``get_value()`` in place changes nothing until it is written back
    with ``set_value()``, and then it counts as a change.

    Errors are always computed; ``should_show_errors`` only gates whether
    they count towards ``is_valid`` and whether FormScope surfaces them.

    Dependents inside the library (bindings through ``dispatcher``, the Form
    through ``connect_listener()``) are plain Python calls made before the
    matching signal, so their exceptions propagate to the caller of
    ``set_value()`` or ``reset()``. The signals are for external observers
    such as widgets.

    Signals (emitted synchronously, only when something actually changed):
        value_changed(name, value)
        dirty_changed(name)
        error_changed(name, message_or_None)
        show_errors_changed(visible)
        form_reset()
    """

    value_changed = pyqtSignal(str, object)
    dirty_changed = pyqtSignal(str)
    error_changed = pyqtSignal(str, object)
    show_errors_changed = pyqtSignal(bool)
    form_reset = pyqtSignal()

    def __init__(self, should_show_errors: Optional[bool] = None, parent: Optional[QObject] = None):
        """
        Args:
            should_show_errors: Initial error visibility. None uses
                FormConfig.show_errors_initially.
            parent: Optional Qt parent
        """
        super().__init__(parent)
        if should_show_errors is None:
            should_show_errors = get_form_config().show_errors_initially

        self._values: Dict[str, _Entry] = {}
        self._dirty_fields: Set[str] = set()
        self._errors: Dict[str, str] = {}
        self._should_show_errors = should_show_errors

        self.dispatcher = FieldChangeDispatcher()
        self._change_listeners: List[Callable[[], None]] = []

    # ========== LISTENERS ==========

    def connect_listener(self, callback: Callable[[], None]) -> None:
        """Call callback after every value change and reset, before the signal."""
        if callback not in self._change_listeners:
            self._change_listeners.append(callback)
            logger.debug(f"Connected change listener: {callback}")

    def disconnect_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._change_listeners:
            self._change_listeners.remove(callback)
            logger.debug(f"Disconnected change listener: {callback}")

    def _notify_change(self) -> None:
        # Copy: a listener may disconnect while being notified
        for callback in list(self._change_listeners):
            callback()

    # ========== VALUES ==========

    @property
    def field_names(self) -> FrozenSet[str]:
        """Names of all fields currently holding a value."""
        return frozenset(self._values)

    def declared_type(self, name: str) -> Any:
        """Declared type of the handle that last wrote name."""
        if name not in self._values:
            raise FieldNotInitializedError(name)
        return self._values[name].value_type

    def has_value(self, name: str) -> bool:
        return name in self._values

    def get_value(self, field: Field[T]) -> T:
        """
        Read a field's value.

        Raises:
            FieldNotInitializedError: If the field has never been written
            FieldTypeMismatchError: If field declares a different type than
                the handle that stored the value
        """
        entry = self._values.get(field.name)
        if entry is None:
            raise FieldNotInitializedError(field.name)
        if entry.value_type != field.value_type:
            raise FieldTypeMismatchError(field.name, entry.value_type, field.value_type)
        return copy.copy(entry.value)

    def set_value(self, field: Field[T], value: T) -> None:
        """
        Store a copy of value for field, tagged with field.value_type.

        Bindings and listeners run before ``value_changed`` is emitted;
        anything they raise propagates from here.
        """
        entry = _Entry(field.value_type, copy.copy(value))
        previous = self._values.get(field.name)
        self._values[field.name] = entry
        if previous == entry:
            return
        logger.debug(f"FormState: {field.name} = {repr(value)[:50]}")
        self.dispatcher.on_value_changed(field.name, entry.value)
        self._notify_change()
        self.value_changed.emit(field.name, copy.copy(entry.value))

    def snapshot(self) -> Dict[str, Any]:
        """Plain name -> value copy of the stored values."""
        return {name: copy.copy(entry.value) for name, entry in self._values.items()}

    # ========== DIRTINESS ==========

    @property
    def dirty_fields(self) -> FrozenSet[str]:
        """Names modified since creation or the last reset."""
        return frozenset(self._dirty_fields)

    def is_field_dirty(self, name: str) -> bool:
        return name in self._dirty_fields

    def mark_dirty(self, name: str) -> bool:
        """Mark name as dirty. Returns True if it was not dirty before."""
        if name in self._dirty_fields:
            return False
        self._dirty_fields.add(name)
        logger.debug(f"FormState: {name} marked dirty")
        self.dirty_changed.emit(name)
        return True

    @property
    def is_dirty(self) -> bool:
        """True if any field has been modified since initialization or the last reset."""
        return bool(self._dirty_fields)

    # ========== ERRORS ==========

    @property
    def errors(self) -> Dict[str, str]:
        """Copy of the active error messages, keyed by field name."""
        return dict(self._errors)

    def error_for(self, name: str) -> Optional[str]:
        """Stored error for name, regardless of visibility."""
        return self._errors.get(name)

    def set_error(self, name: str, message: Optional[str]) -> None:
        """Store message as the error for name, or clear it when message is None."""
        if message is None:
            if self._errors.pop(name, None) is None:
                return
        else:
            if self._errors.get(name) == message:
                return
            self._errors[name] = message
        self.error_changed.emit(name, message)

    @property
    def should_show_errors(self) -> bool:
        """
        Controls when validation errors become visible.

        Validation still runs regardless of this flag.
        """
        return self._should_show_errors

    @should_show_errors.setter
    def should_show_errors(self, value: bool) -> None:
        if value == self._should_show_errors:
            return
        self._should_show_errors = value
        self.show_errors_changed.emit(value)

    @property
    def is_valid(self) -> bool:
        """
        Perceived validity under the current visibility policy.

        A form with hidden errors, or one nobody has touched yet, reports
        valid even if latent validators would fail. ``FormScope.submit()``
        dirties every field and shows errors before checking this.
        """
        return not self._should_show_errors or not self.is_dirty or not self._errors

    # ========== LIFECYCLE ==========

    def reset(self) -> None:
        """
        Clear all values and dirty marks, and hide errors.

        Bindings re-initialize their fields to their defaults and re-run their
        validators on the next composition pass. The store keeps its identity,
        so anything holding a reference to it stays connected.
        """
        self._dirty_fields.clear()
        self._values.clear()
        self.should_show_errors = False
        logger.info("FormState reset")
        self._notify_change()
        self.form_reset.emit()
