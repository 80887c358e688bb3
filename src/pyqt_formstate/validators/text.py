"""String validators: presence, length and regex patterns."""

import re
from typing import Pattern, Union

from pyqt_formstate.protocols.validator import Validator

# Standard email formats: local@domain
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}@[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

# E.164-style phone numbers (e.g. +14155552671, +2348012345678)
PHONE_NUMBER_PATTERN = re.compile(r"\+[1-9]\d{0,2}[1-9]\d{3,11}")


class RequiredValidator(Validator[str]):
    """Ensures a string is not blank."""

    def validate(self, value: str) -> bool:
        return bool(value.strip())


class LengthValidator(Validator[str]):
    """Validates that a string is exactly ``length`` characters long."""

    def __init__(self, error_message: str, length: int):
        super().__init__(error_message)
        self.length = length

    def validate(self, value: str) -> bool:
        return len(value) == self.length


class MinLengthValidator(Validator[str]):
    """Validates that a string has at least ``length`` characters."""

    def __init__(self, error_message: str, length: int):
        super().__init__(error_message)
        self.length = length

    def validate(self, value: str) -> bool:
        return len(value) >= self.length


class MaxLengthValidator(Validator[str]):
    """Validates that a string does not exceed ``length`` characters."""

    def __init__(self, error_message: str, length: int):
        super().__init__(error_message)
        self.length = length

    def validate(self, value: str) -> bool:
        return len(value) <= self.length


class MatchPatternValidator(Validator[str]):
    """Validates that the entire string matches ``pattern``."""

    def __init__(self, error_message: str, pattern: Union[str, Pattern[str]]):
        super().__init__(error_message)
        self.pattern = re.compile(pattern)

    def validate(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


class ContainsPatternValidator(Validator[str]):
    """Validates that ``pattern`` occurs somewhere in the string."""

    def __init__(self, error_message: str, pattern: Union[str, Pattern[str]]):
        super().__init__(error_message)
        self.pattern = re.compile(pattern)

    def validate(self, value: str) -> bool:
        return self.pattern.search(value) is not None


class EmailValidator(MatchPatternValidator):
    """Validates that a string is a standard email address."""

    def __init__(self, error_message: str):
        super().__init__(error_message, EMAIL_PATTERN)


class PhoneNumberValidator(MatchPatternValidator):
    """Validates that a string is an international (E.164) phone number."""

    def __init__(self, error_message: str):
        super().__init__(error_message, PHONE_NUMBER_PATTERN)
