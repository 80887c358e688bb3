"""Sample forms built on pyqt-formstate."""

from .signup import (
    Capacity,
    Project,
    SignUpData,
    build_signup_form,
    signup_body,
)

__all__ = [
    "Capacity",
    "Project",
    "SignUpData",
    "build_signup_form",
    "signup_body",
]
