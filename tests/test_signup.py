"""End-to-end tests for the sign-up form."""

import pytest

from pyqt_formstate.sample import Capacity, Project, SignUpData, build_signup_form
from pyqt_formstate.sample.signup import (
    CAPACITY_FIELD,
    CONFIRM_PASSWORD_FIELD,
    EMAIL_FIELD,
    PASSWORD_FIELD,
    PHONE_NUMBER_FIELD,
    PROJECTS_FIELD,
    TERMS_FIELD,
)


@pytest.fixture
def registrations():
    return []


@pytest.fixture
def form(state, registrations):
    form = build_signup_form(on_submit=registrations.append, state=state)
    form.compose()
    yield form
    form.dispose()


def fill_valid(scope):
    scope.set_value(PHONE_NUMBER_FIELD, "+2348012345678")
    scope.set_value(EMAIL_FIELD, "jane.doe@example.dev")
    scope.set_value(PASSWORD_FIELD, "Secret123!")
    scope.set_value(CONFIRM_PASSWORD_FIELD, "Secret123!")
    scope.set_value(CAPACITY_FIELD, [Capacity.PROFESSIONAL])
    scope.set_value(PROJECTS_FIELD, [Project.COMMERCIAL, Project.OPEN_SOURCE])
    scope.set_value(TERMS_FIELD, True)


def test_initial_state(form):
    scope = form.scope
    assert scope.value(TERMS_FIELD) is False
    assert scope.value(PROJECTS_FIELD) == []
    assert not scope.state.is_dirty
    assert scope.is_valid


def test_empty_submission_shows_required_errors(form, registrations):
    scope = form.scope
    assert not scope.submit()

    assert registrations == []
    assert scope.error(PHONE_NUMBER_FIELD) == "phone number is required"
    assert scope.error(EMAIL_FIELD) == "email is required"
    assert scope.error(PASSWORD_FIELD) == "password is required"
    assert scope.error(CONFIRM_PASSWORD_FIELD) == "password confirmation is required"
    assert scope.error(CAPACITY_FIELD) == "capacity is required"
    assert scope.error(PROJECTS_FIELD) == "you must select 2 options"
    assert scope.error(TERMS_FIELD) == "you must agree with the terms & conditions"


@pytest.mark.parametrize("password, message", [
    ("Short1!", "must be at least 8 characters"),
    ("lowercase1!", "must contain an uppercase character"),
    ("UPPERCASE1!", "must contain a lowercase character"),
    ("NoDigits!!", "must contain a digit"),
    ("NoSymbol123", "must contain a symbol"),
])
def test_password_rules(form, password, message):
    scope = form.scope
    scope.should_show_errors = True
    scope.set_value(PASSWORD_FIELD, password)
    assert scope.error(PASSWORD_FIELD) == message


def test_confirmation_follows_password(form):
    scope = form.scope
    scope.should_show_errors = True
    scope.set_value(PASSWORD_FIELD, "Secret123!")
    scope.set_value(CONFIRM_PASSWORD_FIELD, "Secret123!")
    assert scope.error(CONFIRM_PASSWORD_FIELD) is None

    scope.set_value(PASSWORD_FIELD, "Secret456!")
    assert scope.error(CONFIRM_PASSWORD_FIELD) == "passwords must match"


def test_invalid_email_and_phone(form):
    scope = form.scope
    scope.should_show_errors = True
    scope.set_value(EMAIL_FIELD, "bad")
    scope.set_value(PHONE_NUMBER_FIELD, "08012345678")
    assert scope.error(EMAIL_FIELD) == "must be a valid email address"
    assert scope.error(PHONE_NUMBER_FIELD) == "must be a valid phone number"


def test_valid_submission_collects_data_and_resets(form, registrations):
    scope = form.scope
    fill_valid(scope)

    assert scope.submit()

    assert registrations == [SignUpData(
        phone_number="+2348012345678",
        email="jane.doe@example.dev",
        password="Secret123!",
        confirmation="Secret123!",
        capacity=Capacity.PROFESSIONAL,
        projects=[Project.COMMERCIAL, Project.OPEN_SOURCE],
        terms=True,
    )]
    assert scope.value(EMAIL_FIELD) == ""
    assert scope.value(TERMS_FIELD) is False
    assert not scope.state.is_dirty
    assert not scope.should_show_errors


def test_form_is_reusable_after_reset(form, registrations):
    scope = form.scope
    fill_valid(scope)
    scope.submit()

    assert not scope.submit()
    assert len(registrations) == 1


def test_appending_to_a_read_selection(form):
    scope = form.scope
    scope.should_show_errors = True
    scope.set_value(PROJECTS_FIELD, [Project.COMMERCIAL])

    projects = scope.value(PROJECTS_FIELD)
    projects.append(Project.OPEN_SOURCE)
    scope.set_value(PROJECTS_FIELD, projects)

    assert scope.is_dirty(PROJECTS_FIELD)
    assert scope.error(PROJECTS_FIELD) is None
    assert scope.value(PROJECTS_FIELD) == [Project.COMMERCIAL, Project.OPEN_SOURCE]


def test_reset_restores_empty_selection_after_edits(form):
    scope = form.scope
    projects = scope.value(PROJECTS_FIELD)
    projects.append(Project.PERSONAL)
    scope.set_value(PROJECTS_FIELD, projects)

    scope.reset()

    assert scope.value(PROJECTS_FIELD) == []
