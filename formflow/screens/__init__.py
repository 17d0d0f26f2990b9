"""Screen composition over the form engine."""

from formflow.screens.sign_in import Highlight, SignInFormView, SignInScreen, Tab

__all__ = [
    "SignInScreen",
    "SignInFormView",
    "Highlight",
    "Tab",
]
