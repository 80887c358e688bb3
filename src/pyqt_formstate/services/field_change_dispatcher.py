"""
Field change dispatcher.

Routes FormState value changes to the listeners registered for
that field name, so a binding only hears about its own field instead of
filtering every change in the form.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from pyqt_formstate.protocols import get_form_config

logger = logging.getLogger(__name__)

FieldChangeListener = Callable[['FieldChangeEvent'], None]


@dataclass(frozen=True)
class FieldChangeEvent:
    """Immutable event representing a field value change."""
    field_name: str
    value: Any


class FieldChangeDispatcher:
    """Per-form dispatcher keyed by field name."""

    def __init__(self):
        self._listeners: Dict[str, List[FieldChangeListener]] = {}

    def subscribe(self, field_name: str, listener: FieldChangeListener) -> None:
        """Register listener for changes of field_name (no duplicates)."""
        listeners = self._listeners.setdefault(field_name, [])
        if listener not in listeners:
            listeners.append(listener)

    def unsubscribe(self, field_name: str, listener: FieldChangeListener) -> None:
        """Remove listener; unknown listeners are ignored."""
        listeners = self._listeners.get(field_name)
        if not listeners:
            return
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            del self._listeners[field_name]

    def listener_count(self, field_name: str) -> int:
        return len(self._listeners.get(field_name, ()))

    def on_value_changed(self, field_name: str, value: Any) -> None:
        """Called by FormState.set_value() for every stored change."""
        self.dispatch(FieldChangeEvent(field_name, value))

    def dispatch(self, event: FieldChangeEvent) -> None:
        """Deliver event to every listener of its field, in subscription order."""
        # Copy: listeners may unsubscribe while being notified
        listeners = list(self._listeners.get(event.field_name, ()))

        if get_form_config().debug_validation:
            logger.info(
                f"DISPATCH: {event.field_name} = {repr(event.value)[:50]} "
                f"-> {len(listeners)} listener(s)"
            )

        for listener in listeners:
            listener(event)
