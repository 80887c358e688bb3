"""
Equality validators.

The comparison target is either a fixed value or a zero-argument callable
resolved each time ``validate()`` runs. The callable form lets a validator
track another field's live value::

    EqualsValidator("passwords must match", lambda: scope.value(PASSWORD))

Because any callable is treated as an accessor, comparing against a function
object itself requires wrapping it: ``lambda: some_function``.
"""

from typing import Any, Callable, TypeVar, Union

from pyqt_formstate.protocols.validator import Validator

T = TypeVar("T")


def _resolve(target: Union[Any, Callable[[], Any]]) -> Any:
    return target() if callable(target) else target


class EqualsValidator(Validator[T]):
    """Validates that a value equals ``expected`` (e.g. password confirmation)."""

    def __init__(self, error_message: str, expected: Union[T, Callable[[], T]]):
        super().__init__(error_message)
        self.expected = expected

    def validate(self, value: T) -> bool:
        return value == _resolve(self.expected)


class NotEqualsValidator(Validator[T]):
    """Validates that a value differs from ``unwanted``."""

    def __init__(self, error_message: str, unwanted: Union[T, Callable[[], T]]):
        super().__init__(error_message)
        self.unwanted = unwanted

    def validate(self, value: T) -> bool:
        return value != _resolve(self.unwanted)
