"""Form engine.

Owns field values, runs validation before submission and drives the
submission lifecycle. Renderers subscribe to the engine and receive a
FormSnapshot on every change.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from formflow.interfaces.form import (
    FormRenderer,
    FormSnapshot,
    SubmissionError,
    SubmissionResult,
    SubmissionState,
    SubmitCallback,
    ValidateCallback,
)
from formflow.interfaces.validator import ValidationErrors

logger = logging.getLogger(__name__)

_BUSY_STATES = (SubmissionState.VALIDATING, SubmissionState.SUBMITTING)


class FormEngine:
    """Validation and submission lifecycle for a single form instance.

    At most one submission is in flight at a time. Submit requests and
    field edits that arrive while validating or submitting are dropped.
    A failing submit handler never raises out of the engine: the failure
    is logged and returned as a FAILED SubmissionResult, which is also
    exposed on later snapshots as ``last_result``.

    Example:
        ```python
        engine = FormEngine(
            initial_values={"phone": "", "password": ""},
            validate=lambda values: validate(rules, values),
            on_submit=client.sign_in,
        )
        engine.subscribe(renderer)
        result = await engine.submit()
        ```
    """

    def __init__(
        self,
        initial_values: Mapping[str, Any],
        validate: ValidateCallback,
        on_submit: SubmitCallback,
    ) -> None:
        """Initialize the engine.

        Args:
            initial_values: Field values at mount. Copied.
            validate: Returns the error map for a copy of the values.
            on_submit: Async handler awaited with a copy of valid values.
        """
        self._values: dict[str, Any] = dict(initial_values)
        self._validate = validate
        self._on_submit = on_submit

        self._state = SubmissionState.IDLE
        self._field_errors: ValidationErrors = {}
        self._last_result: SubmissionResult | None = None
        self._renderers: list[FormRenderer] = []
        self._tasks: set[asyncio.Task] = set()
        self._mounted = True

    # =========================================================================
    # State
    # =========================================================================

    @property
    def values(self) -> dict[str, Any]:
        """Copy of the current field values."""
        return dict(self._values)

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def submitting(self) -> bool:
        return self._state in _BUSY_STATES

    @property
    def field_errors(self) -> ValidationErrors:
        return {name: list(messages) for name, messages in self._field_errors.items()}

    @property
    def last_result(self) -> SubmissionResult | None:
        return self._last_result

    @property
    def mounted(self) -> bool:
        return self._mounted

    def snapshot(self) -> FormSnapshot:
        """Build an immutable view of the current form state."""
        return FormSnapshot(
            values=self.values,
            state=self._state,
            field_errors=self.field_errors,
            last_result=self._last_result,
            handle_submit=self.handle_submit,
        )

    # =========================================================================
    # Observers
    # =========================================================================

    def subscribe(self, renderer: FormRenderer) -> None:
        """Register a renderer and render the current snapshot immediately."""
        if not self._mounted:
            return
        self._renderers.append(renderer)
        renderer.render(self.snapshot())

    def unsubscribe(self, renderer: FormRenderer) -> None:
        if renderer in self._renderers:
            self._renderers.remove(renderer)

    def unmount(self) -> None:
        """Tear the form down.

        Any outcome of an in-flight submission is discarded and no further
        snapshots are emitted.
        """
        logger.debug("Form unmounted")
        self._mounted = False
        self._renderers.clear()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for renderer in list(self._renderers):
            renderer.render(snapshot)

    def _transition(self, state: SubmissionState) -> None:
        if not self._mounted:
            return
        logger.debug(f"Form state: {self._state.value} -> {state.value}")
        self._state = state
        self._notify()

    # =========================================================================
    # Field edits
    # =========================================================================

    def change(self, name: str, value: Any) -> None:
        """Set a field value.

        Ignored while the form is busy or unmounted.

        Raises:
            KeyError: If ``name`` is not a field of this form.
        """
        if name not in self._values:
            raise KeyError(f"Unknown form field: {name}")
        if not self._mounted or self.submitting:
            logger.debug(f"Ignoring edit of '{name}' while {self._state.value}")
            return

        self._values[name] = value
        self._notify()

    # =========================================================================
    # Submission
    # =========================================================================

    async def submit(self) -> SubmissionResult | None:
        """Validate and, if valid, submit the current values.

        Returns:
            The submission outcome, or None when the request was dropped
            because a submission is already in flight or the form is
            unmounted.
        """
        if not self._mounted:
            return None
        if self.submitting:
            logger.debug("Submit ignored: a submission is already in flight")
            return None

        try:
            return await self._run_submission()
        except asyncio.CancelledError:
            logger.info("Form submission cancelled")
            raise
        finally:
            if self._mounted and self.submitting:
                self._transition(SubmissionState.IDLE)

    async def _run_submission(self) -> SubmissionResult:
        self._transition(SubmissionState.VALIDATING)
        values = self.values
        errors = self._validate(values) or {}
        self._field_errors = {name: list(messages) for name, messages in errors.items()}

        if self._field_errors:
            logger.info(f"Submit blocked by validation errors on: {', '.join(self._field_errors)}")
            self._last_result = SubmissionResult.invalid(self.field_errors)
            self._transition(SubmissionState.IDLE)
            return self._last_result

        try:
            self._transition(SubmissionState.SUBMITTING)
            payload = await self._on_submit(values)
        except Exception as e:
            logger.error(f"Form submission failed: {e}", exc_info=True)
            return self._settle(SubmissionResult.failed(_as_submission_error(e)))

        logger.info("Form submitted successfully")
        return self._settle(SubmissionResult.succeeded(payload))

    def handle_submit(self) -> asyncio.Task:
        """Schedule ``submit()`` on the running event loop.

        Returns:
            The scheduled task.

        Raises:
            RuntimeError: If no event loop is running.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self.submit())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _settle(self, result: SubmissionResult) -> SubmissionResult:
        if not self._mounted:
            logger.debug(f"Discarding {result.state.value} outcome of unmounted form")
            return result

        self._last_result = result
        self._transition(result.state)
        self._transition(SubmissionState.IDLE)
        return result


def _as_submission_error(error: Exception) -> SubmissionError:
    if isinstance(error, SubmissionError):
        return error
    wrapped = SubmissionError(f"Submit handler failed: {error}")
    wrapped.__cause__ = error
    return wrapped
