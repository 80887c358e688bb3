"""pytest configuration and fixtures for pyqt-formstate tests."""

import pytest
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QCoreApplication instance for tests (no display needed)."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_form_config():
    """Restore the global FormConfig after each test."""
    from pyqt_formstate.protocols import set_form_config

    yield
    set_form_config(None)


@pytest.fixture
def state(qapp):
    from pyqt_formstate.forms import FormState

    return FormState()


@pytest.fixture
def submitted():
    """Records every scope passed to a submit callback."""
    return []


@pytest.fixture
def scope(state, submitted):
    from pyqt_formstate.forms import FormScope

    return FormScope(state, submitted.append)
