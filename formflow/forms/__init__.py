"""Form state and submission lifecycle."""

from formflow.forms.engine import FormEngine

__all__ = [
    "FormEngine",
]
