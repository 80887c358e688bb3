"""
Built-in validators.

Each validator pairs a fixed error message with a pure ``validate()`` check.
Lists of validators are evaluated in order and the first failure wins.
"""

from .text import (
    RequiredValidator,
    LengthValidator,
    MinLengthValidator,
    MaxLengthValidator,
    MatchPatternValidator,
    ContainsPatternValidator,
    EmailValidator,
    PhoneNumberValidator,
)
from .numeric import (
    NumericValidator,
    MinValidator,
    MaxValidator,
    RangeValidator,
    to_int,
    to_float,
)
from .equality import EqualsValidator, NotEqualsValidator
from .selection import (
    NonEmptySelectionValidator,
    MinSelectionValidator,
    MaxSelectionValidator,
    ExactSelectionValidator,
    SelectionRangeValidator,
)

__all__ = [
    "RequiredValidator",
    "LengthValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "MatchPatternValidator",
    "ContainsPatternValidator",
    "EmailValidator",
    "PhoneNumberValidator",
    "NumericValidator",
    "MinValidator",
    "MaxValidator",
    "RangeValidator",
    "to_int",
    "to_float",
    "EqualsValidator",
    "NotEqualsValidator",
    "NonEmptySelectionValidator",
    "MinSelectionValidator",
    "MaxSelectionValidator",
    "ExactSelectionValidator",
    "SelectionRangeValidator",
]
