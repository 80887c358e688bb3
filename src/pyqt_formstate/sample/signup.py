"""
Sign-up form definition.

Headless: declares the fields, their validators and the submit handler, and
leaves rendering to whatever widgets the application binds to the scope.

    form = build_signup_form(on_submit=register_user)
    form.compose()
    # widgets call form.scope.set_value(...) as the user types
    form.scope.submit(on_invalid=lambda: status.setText("Please fix the errors"))
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from pyqt_formstate.core.field import Field
from pyqt_formstate.forms.form import Form
from pyqt_formstate.forms.form_scope import FormScope
from pyqt_formstate.forms.form_state import FormState
from pyqt_formstate.forms.binding import form_field
from pyqt_formstate.validators import (
    ContainsPatternValidator,
    EmailValidator,
    EqualsValidator,
    ExactSelectionValidator,
    MinLengthValidator,
    PhoneNumberValidator,
    RequiredValidator,
)


class Capacity(Enum):
    PERSONAL = "Personal"
    PROFESSIONAL = "Professional"


class Project(Enum):
    COMMERCIAL = "Commercial"
    OPEN_SOURCE = "OpenSource"
    PERSONAL = "Personal"


@dataclass(frozen=True)
class SignUpData:
    """Values collected by a successful sign-up submission."""
    phone_number: str
    email: str
    password: str
    confirmation: str
    capacity: Capacity
    projects: List[Project]
    terms: bool


PHONE_NUMBER_FIELD = Field.text("phone_number")
EMAIL_FIELD = Field.text("email")
PASSWORD_FIELD = Field.text("password")
CONFIRM_PASSWORD_FIELD = Field.text("confirm_password")
CAPACITY_FIELD = Field.list_of("capacity", Capacity)
PROJECTS_FIELD = Field.list_of("projects", Project)
TERMS_FIELD = Field.boolean("terms")

SYMBOL_PATTERN = re.compile(r"[^A-Za-z0-9 ]")
DIGIT_PATTERN = re.compile(r"\d")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")


def signup_body(scope: FormScope) -> None:
    """Attach every sign-up field. Validator lists are rebuilt each pass."""
    form_field(scope, PHONE_NUMBER_FIELD, "", [
        RequiredValidator("phone number is required"),
        PhoneNumberValidator("must be a valid phone number"),
    ])
    form_field(scope, EMAIL_FIELD, "", [
        RequiredValidator("email is required"),
        EmailValidator("must be a valid email address"),
    ])
    form_field(scope, PASSWORD_FIELD, "", [
        RequiredValidator("password is required"),
        MinLengthValidator("must be at least 8 characters", 8),
        ContainsPatternValidator("must contain an uppercase character", UPPERCASE_PATTERN),
        ContainsPatternValidator("must contain a lowercase character", LOWERCASE_PATTERN),
        ContainsPatternValidator("must contain a digit", DIGIT_PATTERN),
        ContainsPatternValidator("must contain a symbol", SYMBOL_PATTERN),
    ])
    form_field(scope, CONFIRM_PASSWORD_FIELD, "", [
        RequiredValidator("password confirmation is required"),
        EqualsValidator("passwords must match", lambda: scope.value(PASSWORD_FIELD)),
    ])
    form_field(scope, CAPACITY_FIELD, [], [
        ExactSelectionValidator("capacity is required", 1),
    ])
    form_field(scope, PROJECTS_FIELD, [], [
        ExactSelectionValidator("you must select 2 options", 2),
    ])
    form_field(scope, TERMS_FIELD, False, [
        EqualsValidator("you must agree with the terms & conditions", True),
    ])


def collect_signup_data(scope: FormScope) -> SignUpData:
    return SignUpData(
        phone_number=scope.value(PHONE_NUMBER_FIELD),
        email=scope.value(EMAIL_FIELD),
        password=scope.value(PASSWORD_FIELD),
        confirmation=scope.value(CONFIRM_PASSWORD_FIELD),
        capacity=scope.value(CAPACITY_FIELD)[0],
        projects=list(scope.value(PROJECTS_FIELD)),
        terms=scope.value(TERMS_FIELD),
    )


def build_signup_form(on_submit: Callable[[SignUpData], None],
                      state: Optional[FormState] = None) -> Form:
    """
    Create the sign-up Form.

    A valid submission hands a SignUpData to on_submit, then resets the form.
    """
    def submit(scope: FormScope) -> None:
        on_submit(collect_signup_data(scope))
        scope.reset()

    return Form(on_submit=submit, content=signup_body, state=state)
