"""
Numeric validators operating on raw string input.

Text inputs hand over what the user typed, so these validators parse the
string themselves. Parsing is delegated to a ``transform`` callable returning
the parsed number or None when the string is not a number:

    MinValidator("must be 18 or over", minimum=18, transform=to_int)
    RangeValidator("between 0 and 1", minimum=0.0, maximum=1.0)

Blank input bypasses parsing entirely and is decided by ``allow_empty``.
Unparseable input always fails.
"""

from abc import abstractmethod
from typing import Callable, Generic, Optional, TypeVar, Union

from pyqt_formstate.exceptions import ValidatorConfigurationError
from pyqt_formstate.protocols.validator import Validator

N = TypeVar("N", int, float)

Transform = Callable[[str], Optional[N]]


def to_int(value: str) -> Optional[int]:
    """Parse an integer, returning None when the string is not one."""
    try:
        return int(value)
    except ValueError:
        return None


def to_float(value: str) -> Optional[float]:
    """Parse a float, returning None when the string is not one."""
    try:
        return float(value)
    except ValueError:
        return None


class NumericValidator(Validator[str], Generic[N]):
    """
    Base class for validators comparing a number parsed from a string.

    Handles blank-value handling and parsing, then delegates the comparison
    to ``predicate()``.

    Attributes:
        allow_empty: Whether blank input is considered valid
        transform: Converts the raw string to a number, or None if parsing fails
    """

    def __init__(self, error_message: str, transform: Transform = to_float,
                 allow_empty: bool = False):
        super().__init__(error_message)
        self.transform = transform
        self.allow_empty = allow_empty

    def validate(self, value: str) -> bool:
        if not value.strip():
            return self.allow_empty
        parsed = self.transform(value)
        if parsed is None:
            return False
        return self.predicate(parsed)

    @abstractmethod
    def predicate(self, value: N) -> bool:
        """Perform the numeric comparison on the parsed value."""
        pass


class MinValidator(NumericValidator[N]):
    """Validates that a numeric string is greater than or equal to ``minimum``."""

    def __init__(self, error_message: str, minimum: Union[int, float],
                 transform: Transform = to_float, allow_empty: bool = False):
        super().__init__(error_message, transform, allow_empty)
        self.minimum = minimum

    def predicate(self, value: N) -> bool:
        return value >= self.minimum


class MaxValidator(NumericValidator[N]):
    """Validates that a numeric string is less than or equal to ``maximum``."""

    def __init__(self, error_message: str, maximum: Union[int, float],
                 transform: Transform = to_float, allow_empty: bool = False):
        super().__init__(error_message, transform, allow_empty)
        self.maximum = maximum

    def predicate(self, value: N) -> bool:
        return value <= self.maximum


class RangeValidator(NumericValidator[N]):
    """
    Validates that a numeric string lies within ``minimum``..``maximum`` (inclusive).

    Raises:
        ValidatorConfigurationError: If ``minimum`` is greater than ``maximum``
    """

    def __init__(self, error_message: str, minimum: Union[int, float],
                 maximum: Union[int, float], transform: Transform = to_float,
                 allow_empty: bool = False):
        if minimum > maximum:
            raise ValidatorConfigurationError(
                f"minimum ({minimum}) must not be greater than maximum ({maximum})"
            )
        super().__init__(error_message, transform, allow_empty)
        self.minimum = minimum
        self.maximum = maximum

    def predicate(self, value: N) -> bool:
        return self.minimum <= value <= self.maximum
