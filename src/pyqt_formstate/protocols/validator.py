"""
Validator ABC contract.

Any object participating in field validation inherits from ``Validator`` and
implements ``validate()``. Validators must be pure: the result depends only on
the value and on configuration captured at construction (or on a zero-argument
accessor that configuration resolves at validation time).

Validators compare by identity. A binding re-runs when it is handed a validator
sequence whose elements are not the same objects as last time, so rebuilding
the list on every composition pass is enough to pick up new configuration.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """
    ABC for a single validation rule over values of type ``T``.

    Attributes:
        error_message: Message surfaced when ``validate()`` returns False
    """

    error_message: str

    def __init__(self, error_message: str):
        self.error_message = error_message

    @abstractmethod
    def validate(self, value: T) -> bool:
        """
        Check a value.

        Args:
            value: The field's current value

        Returns:
            True when the value passes this rule
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_message!r})"


def first_failing(validators: Iterable[Validator[T]], value: T) -> Optional[Validator[T]]:
    """
    Return the first validator rejecting ``value``, or None if all pass.

    Evaluation stops at the first failure; later validators are not called.
    """
    for validator in validators:
        if not validator.validate(value):
            return validator
    return None
