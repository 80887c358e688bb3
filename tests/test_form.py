"""Tests for the Form container and composition passes."""

import itertools
import logging

import pytest

from pyqt_formstate.core import Field
from pyqt_formstate.exceptions import FieldTypeMismatchError, NoActiveCompositionError
from pyqt_formstate.forms import Composition, Form, current_composition, form_field
from pyqt_formstate.protocols import FormConfig
from pyqt_formstate.validators import EmailValidator, EqualsValidator, RequiredValidator

EMAIL = Field.text("email")
PASSWORD = Field.text("password")
CONFIRM = Field.text("confirm_password")
NICKNAME = Field.text("nickname")


def email_body(scope):
    form_field(scope, EMAIL, "", [
        RequiredValidator("email is required"),
        EmailValidator("must be a valid email address"),
    ])


def password_body(scope):
    form_field(scope, PASSWORD, "", [RequiredValidator("password is required")])
    form_field(scope, CONFIRM, "", [
        RequiredValidator("password confirmation is required"),
        EqualsValidator("passwords must match", lambda: scope.value(PASSWORD)),
    ])


@pytest.fixture
def email_form(state, submitted):
    form = Form(on_submit=submitted.append, content=email_body, state=state)
    form.compose()
    yield form
    form.dispose()


def test_compose_initializes_fields(email_form):
    scope = email_form.scope
    assert scope.value(EMAIL) == ""
    assert not scope.is_dirty(EMAIL)
    assert scope.error(EMAIL) is None
    assert scope.is_valid


def test_default_writes_schedule_one_follow_up_pass(email_form):
    assert email_form.composition.pass_count == 2


def test_errors_surface_once_dirty_and_shown(email_form):
    scope = email_form.scope
    scope.set_value(EMAIL, "bad")
    assert scope.error(EMAIL) is None

    scope.should_show_errors = True
    assert scope.error(EMAIL) == "must be a valid email address"
    assert not scope.is_valid

    scope.set_value(EMAIL, "a@b.co")
    assert scope.error(EMAIL) is None
    assert scope.is_valid


def test_submit_of_untouched_form_is_blocked(email_form, submitted):
    invalid = []
    assert not email_form.scope.submit(on_invalid=lambda: invalid.append(True))
    assert submitted == []
    assert invalid == [True]
    assert email_form.scope.error(EMAIL) == "email is required"


def test_submit_of_valid_form(email_form, submitted):
    email_form.scope.set_value(EMAIL, "a@b.co")
    assert email_form.scope.submit()
    assert submitted == [email_form.scope]


def test_latest_on_submit_is_used(email_form, submitted):
    calls = []
    email_form.on_submit = lambda scope: calls.append(scope.value(EMAIL))
    email_form.scope.set_value(EMAIL, "a@b.co")

    email_form.scope.submit()

    assert calls == ["a@b.co"]
    assert submitted == []


def test_reset_reinitializes_through_recomposition(email_form):
    scope = email_form.scope
    scope.set_value(EMAIL, "bad")
    scope.submit()

    scope.reset()

    assert scope.value(EMAIL) == ""
    assert not scope.is_dirty(EMAIL)
    assert not scope.should_show_errors
    assert scope.state.error_for("email") == "email is required"
    assert scope.is_valid


def test_value_change_rebuilds_cross_field_validators(state, submitted):
    form = Form(on_submit=submitted.append, content=password_body, state=state)
    form.compose()
    scope = form.scope

    scope.set_value(PASSWORD, "Secret1!")
    scope.set_value(CONFIRM, "Secret1!")
    assert state.error_for("confirm_password") is None

    scope.set_value(PASSWORD, "Changed1!")
    assert state.error_for("confirm_password") == "passwords must match"

    scope.set_value(CONFIRM, "Changed1!")
    assert state.error_for("confirm_password") is None
    form.dispose()


def test_no_recompose_when_disabled(state, submitted):
    form = Form(on_submit=submitted.append, content=password_body, state=state,
                config=FormConfig(recompose_on_change=False))
    form.compose()
    passes = form.composition.pass_count

    form.scope.set_value(PASSWORD, "Secret1!")

    assert form.composition.pass_count == passes
    form.dispose()


def test_untouched_bindings_are_disposed(state, submitted):
    show_nickname = {"value": True}

    def body(scope):
        form_field(scope, EMAIL, "", [])
        if show_nickname["value"]:
            form_field(scope, NICKNAME, "", [RequiredValidator("nickname is required")])

    form = Form(on_submit=submitted.append, content=body, state=state)
    form.compose()
    assert ("validation", "nickname") in form.composition

    show_nickname["value"] = False
    form.compose()

    assert ("validation", "nickname") not in form.composition
    assert state.dispatcher.listener_count("nickname") == 0
    assert state.dispatcher.listener_count("email") == 1
    form.dispose()


def test_recomposition_is_bounded(state, submitted, caplog):
    counter = itertools.count()
    counter_field = Field.integer("counter")

    def body(scope):
        scope.set_value(counter_field, next(counter))

    form = Form(on_submit=submitted.append, content=body, state=state,
                config=FormConfig(max_recompose_passes=3))

    with caplog.at_level(logging.WARNING, logger="pyqt_formstate.forms.form"):
        form.compose()

    assert form.composition.pass_count == 3
    assert "stopping recomposition" in caplog.text
    form.dispose()


def test_compose_from_body_only_schedules(state, submitted):
    forms = []
    runs = []

    def body(scope):
        runs.append(True)
        if len(runs) == 1:
            forms[0].compose()

    form = Form(on_submit=submitted.append, content=body, state=state)
    forms.append(form)
    form.compose()

    assert len(runs) == 2
    form.dispose()


def test_failing_pass_keeps_bindings(state, submitted):
    fail = {"value": False}

    def body(scope):
        form_field(scope, EMAIL, "", [])
        if fail["value"]:
            raise RuntimeError("boom")

    form = Form(on_submit=submitted.append, content=body, state=state,
                config=FormConfig(recompose_on_change=False))
    form.compose()

    fail["value"] = True
    with pytest.raises(RuntimeError):
        form.compose()

    assert ("validation", "email") in form.composition
    form.dispose()


def test_dispose_releases_bindings(state, submitted):
    form = Form(on_submit=submitted.append, content=email_body, state=state)
    form.compose()
    passes = form.composition.pass_count

    form.dispose()
    form.scope.set_value(EMAIL, "x")

    assert len(form.composition) == 0
    assert state.dispatcher.listener_count("email") == 0
    assert form.composition.pass_count == passes


def test_current_composition_outside_a_pass():
    with pytest.raises(NoActiveCompositionError):
        current_composition()


def test_composition_remember_creates_once():
    composition = Composition()
    created = []

    def factory():
        created.append(True)
        return object()

    with composition.composing():
        first = composition.remember("key", factory)
        assert current_composition() is composition
    with composition.composing():
        second = composition.remember("key", factory)

    assert first is second
    assert created == [True]


def test_body_error_on_value_change_reaches_caller(state, submitted):
    fail = {"value": False}

    def body(scope):
        form_field(scope, EMAIL, "", [])
        if fail["value"]:
            raise RuntimeError("body failed")

    form = Form(on_submit=submitted.append, content=body, state=state)
    form.compose()
    fail["value"] = True

    with pytest.raises(RuntimeError, match="body failed"):
        form.scope.set_value(EMAIL, "a@b.co")

    fail["value"] = False
    form.scope.set_value(EMAIL, "c@d.co")
    assert form.scope.is_dirty(EMAIL)
    form.dispose()


def test_body_error_on_reset_reaches_caller(state, submitted):
    fail = {"value": False}

    def body(scope):
        form_field(scope, EMAIL, "", [])
        if fail["value"]:
            raise RuntimeError("body failed")

    form = Form(on_submit=submitted.append, content=body, state=state)
    form.compose()
    fail["value"] = True

    with pytest.raises(RuntimeError, match="body failed"):
        form.scope.reset()
    form.dispose()


def test_mismatched_write_to_bound_field_reaches_caller(email_form):
    with pytest.raises(FieldTypeMismatchError):
        email_form.scope.set_value(Field.integer("email"), 5)


def test_dispose_disconnects_change_listener(state, submitted):
    runs = []
    form = Form(on_submit=submitted.append, content=lambda scope: runs.append(True), state=state)
    form.compose()
    form.dispose()

    state.set_value(EMAIL, "x")
    state.reset()

    assert len(runs) == 1
