"""Form engine interfaces.

Defines the submission lifecycle, the snapshot handed to renderers and the
result type returned from a submit request.
"""

import enum
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from formflow.interfaces.validator import FieldValues, ValidationErrors


class SubmissionState(str, enum.Enum):
    """Submission lifecycle of a form.

    The lifecycle follows these states:
    IDLE -> VALIDATING -> SUBMITTING -> SUCCEEDED -> IDLE
                |              |
                v              v
              IDLE           FAILED -> IDLE
    """

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionError(Exception):
    """Exception raised when a submit handler fails."""

    pass


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submit request.

    Attributes:
        state: SUCCEEDED, FAILED, or IDLE when validation blocked the submit.
        payload: Whatever the submit handler returned.
        error: The failure, when the handler raised.
        field_errors: Validation errors that blocked the submit.
    """

    state: SubmissionState
    payload: Any = None
    error: SubmissionError | None = None
    field_errors: ValidationErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True if the submit handler completed."""
        return self.state is SubmissionState.SUCCEEDED

    @classmethod
    def succeeded(cls, payload: Any = None) -> "SubmissionResult":
        return cls(state=SubmissionState.SUCCEEDED, payload=payload)

    @classmethod
    def failed(cls, error: SubmissionError) -> "SubmissionResult":
        return cls(state=SubmissionState.FAILED, error=error)

    @classmethod
    def invalid(cls, field_errors: ValidationErrors) -> "SubmissionResult":
        return cls(state=SubmissionState.IDLE, field_errors=field_errors)


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable view of a form, handed to renderers on every change.

    Attributes:
        values: Copy of the current field values.
        state: Current submission state.
        field_errors: Errors from the latest validation pass.
        last_result: Outcome of the latest submit, if any.
        handle_submit: Callable that requests a submit.
    """

    values: Mapping[str, Any]
    state: SubmissionState
    field_errors: ValidationErrors
    last_result: SubmissionResult | None
    handle_submit: Callable[[], Any]

    @property
    def submitting(self) -> bool:
        """True while validating or awaiting the submit handler."""
        return self.state in (SubmissionState.VALIDATING, SubmissionState.SUBMITTING)


class FormRenderer(ABC):
    """Observer that draws a form from its snapshots."""

    @abstractmethod
    def render(self, snapshot: FormSnapshot) -> None:
        """Render the given snapshot."""
        ...


ValidateCallback = Callable[[FieldValues], ValidationErrors | None]
SubmitCallback = Callable[[dict[str, Any]], Awaitable[Any]]
