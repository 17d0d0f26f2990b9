"""Abstract base classes and value types for forms and segmentation."""

from formflow.interfaces.form import (
    FormRenderer,
    FormSnapshot,
    SubmissionError,
    SubmissionResult,
    SubmissionState,
)
from formflow.interfaces.screen import (
    BaseNavigator,
    BaseSessionStore,
    BaseSignInClient,
    BaseTranslator,
    Route,
)
from formflow.interfaces.segmenter import BaseSegmenter, MatchSegment, PlainSegment, TextSegment
from formflow.interfaces.validator import (
    BaseRule,
    BaseValidator,
    ValidationErrors,
    ValidationOptions,
)

__all__ = [
    "BaseRule",
    "BaseValidator",
    "ValidationErrors",
    "ValidationOptions",
    "BaseSegmenter",
    "PlainSegment",
    "MatchSegment",
    "TextSegment",
    "FormRenderer",
    "FormSnapshot",
    "SubmissionError",
    "SubmissionResult",
    "SubmissionState",
    "BaseTranslator",
    "BaseNavigator",
    "BaseSignInClient",
    "BaseSessionStore",
    "Route",
]
