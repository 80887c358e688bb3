"""Selection validators checking the number of chosen items in a sequence."""

from typing import Sequence, TypeVar

from pyqt_formstate.exceptions import ValidatorConfigurationError
from pyqt_formstate.protocols.validator import Validator

T = TypeVar("T")


class NonEmptySelectionValidator(Validator[Sequence[T]]):
    """Validates that a selection is not empty."""

    def validate(self, value: Sequence[T]) -> bool:
        return len(value) > 0


class MinSelectionValidator(Validator[Sequence[T]]):
    """Validates that a selection contains at least ``minimum`` items."""

    def __init__(self, error_message: str, minimum: int):
        super().__init__(error_message)
        self.minimum = minimum

    def validate(self, value: Sequence[T]) -> bool:
        return len(value) >= self.minimum


class MaxSelectionValidator(Validator[Sequence[T]]):
    """Validates that a selection contains at most ``maximum`` items."""

    def __init__(self, error_message: str, maximum: int):
        super().__init__(error_message)
        self.maximum = maximum

    def validate(self, value: Sequence[T]) -> bool:
        return len(value) <= self.maximum


class ExactSelectionValidator(Validator[Sequence[T]]):
    """Validates that a selection contains exactly ``size`` items."""

    def __init__(self, error_message: str, size: int):
        super().__init__(error_message)
        self.size = size

    def validate(self, value: Sequence[T]) -> bool:
        return len(value) == self.size


class SelectionRangeValidator(Validator[Sequence[T]]):
    """
    Validates that a selection holds between ``minimum`` and ``maximum`` items (inclusive).

    Useful for prompts such as "Select 2-5 options".

    Raises:
        ValidatorConfigurationError: If ``minimum`` is negative or greater than ``maximum``
    """

    def __init__(self, error_message: str, minimum: int, maximum: int):
        if minimum < 0:
            raise ValidatorConfigurationError(f"minimum must not be negative (was {minimum})")
        if minimum > maximum:
            raise ValidatorConfigurationError(
                f"minimum ({minimum}) must not be greater than maximum ({maximum})"
            )
        super().__init__(error_message)
        self.minimum = minimum
        self.maximum = maximum

    def validate(self, value: Sequence[T]) -> bool:
        return self.minimum <= len(value) <= self.maximum
