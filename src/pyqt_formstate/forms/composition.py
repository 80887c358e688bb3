"""
Composition - explicit stand-in for a declarative runtime's recomposition.

A Form body is a plain callable run once per composition pass. Anything the
body wants to keep across passes (a validation binding, for instance) is
stored in a slot via ``remember()``, keyed by something stable such as the
field name. Slots not touched during a pass are disposed when the pass ends,
the same way a declarative runtime forgets effects that leave the tree.

The composition running the current pass is published through a context
variable so helpers like ``validation_effect()`` can find it without the body
passing it around.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Dict, Hashable, Optional, Set, TypeVar

from pyqt_formstate.exceptions import NoActiveCompositionError

logger = logging.getLogger(__name__)

S = TypeVar("S")

_current_composition: ContextVar[Optional['Composition']] = ContextVar(
    "pyqt_formstate_composition", default=None
)


class Composition:
    """Slot table remembered across composition passes."""

    def __init__(self):
        self._slots: Dict[Hashable, Any] = {}
        self._touched: Set[Hashable] = set()
        self.pass_count = 0

    @contextmanager
    def composing(self):
        """
        Run one pass with this composition active.

        Slots not remembered during the pass are disposed on normal exit.
        A pass that raises keeps every slot, so a failing body does not tear
        down bindings that were alive before it.
        """
        token = _current_composition.set(self)
        self._touched = set()
        try:
            yield self
        finally:
            _current_composition.reset(token)
        self.pass_count += 1
        self._dispose_untouched()

    def remember(self, key: Hashable, factory: Callable[[], S]) -> S:
        """Return the slot stored under key, creating it with factory on first use."""
        self._touched.add(key)
        if key not in self._slots:
            self._slots[key] = factory()
            logger.debug(f"Composition: created slot {key!r}")
        return self._slots[key]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def dispose(self) -> None:
        """Dispose every slot."""
        for key in list(self._slots):
            self._dispose_slot(key)

    def _dispose_untouched(self) -> None:
        for key in [k for k in self._slots if k not in self._touched]:
            self._dispose_slot(key)

    def _dispose_slot(self, key: Hashable) -> None:
        slot = self._slots.pop(key)
        dispose = getattr(slot, "dispose", None)
        if dispose is not None:
            dispose()
        logger.debug(f"Composition: disposed slot {key!r}")


def current_composition() -> Composition:
    """
    Composition running the current pass.

    Raises:
        NoActiveCompositionError: If called outside Form.compose()
    """
    composition = _current_composition.get()
    if composition is None:
        raise NoActiveCompositionError(
            "No active composition. validation_effect() and form_field() must be "
            "called from a Form body during Form.compose(); outside a Form, "
            "drive a ValidationBinding directly."
        )
    return composition
