"""Form controller: binds field values to a validated request and drives a submit.

One :class:`FormController` lives in each Gradio session (``gr.State``). It
owns the session's :class:`UIState` and replaces it through the pure update
functions in :mod:`stablegen.ui.state`. The generation client is passed in
per call and never sees UI state.

In-flight policy
----------------
Nothing locks the form while a request is outstanding, so a second submit
can start before the first settles. Every submission takes a ticket; an
outcome is applied only if its ticket is still the latest one issued. The
most recently started request therefore always wins, whatever order the
responses arrive in.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from stablegen.core.errors import GenerationError
from stablegen.core.models import GenerationRequest, GenerationResult
from stablegen.core.validation import FieldError, validate_field, validate_form

from .models import FormPhase, SubmitOutcome, UIState, default_form_values
from .state import (
    apply_generation_error,
    apply_generation_result,
    begin_submission,
    dismiss_error,
)

logger = logging.getLogger(__name__)


class GenerationBackend(Protocol):
    """Anything with a ``generate`` method (StabilityClient, test fakes)."""

    def generate(self, request: GenerationRequest) -> GenerationResult: ...


@dataclass
class FormController:
    """Per-session form state and submit logic.

    Attributes
    ----------
    values : dict[str, Any]
        Working (unvalidated) field values
    field_errors : dict[str, FieldError]
        Inline errors currently shown, keyed by field name
    ui : UIState
        Images and error banner currently shown
    phase : FormPhase
        IDLE between submissions
    last_outcome : SubmitOutcome | None
        How the most recent applied submission ended
    """

    values: dict[str, Any] = field(default_factory=default_form_values)
    field_errors: dict[str, FieldError] = field(default_factory=dict)
    ui: UIState = field(default_factory=UIState)
    phase: FormPhase = FormPhase.IDLE
    last_outcome: SubmitOutcome | None = None
    latest_ticket: int = 0

    def set_field(self, name: str, value: Any) -> FieldError | None:
        """Update one working value and re-validate that field only.

        Raises:
            KeyError: If name is not a form field
        """
        error = validate_field(name, value)
        self.values[name] = value
        if error is None:
            self.field_errors.pop(name, None)
        else:
            self.field_errors[name] = error
        return error

    def submit(self, client: GenerationBackend) -> SubmitOutcome:
        """Validate all fields and, if valid, run one generation.

        Field errors abort before any network call. Errors raised by the
        client become the banner message; images are only ever replaced as a
        whole by a successful result.

        Returns:
            The outcome of this submission
        """
        self.phase = FormPhase.VALIDATING
        result = validate_form(self.values)
        if not result.ok:
            self.field_errors = dict(result.errors)
            logger.info(f"Submit blocked by field errors: {sorted(self.field_errors)}")
            return self._finish(SubmitOutcome.INVALID)

        self.field_errors = {}
        self.ui = begin_submission(self.ui)
        self.latest_ticket += 1
        ticket = self.latest_ticket
        self.phase = FormPhase.SUBMITTING

        try:
            generation = client.generate(result.request)
        except GenerationError as e:
            if ticket != self.latest_ticket:
                return self._discard(ticket)
            self.ui = apply_generation_error(self.ui, str(e))
            return self._finish(SubmitOutcome.FAILED)

        if ticket != self.latest_ticket:
            return self._discard(ticket)
        self.ui = apply_generation_result(self.ui, generation)
        return self._finish(SubmitOutcome.SUCCEEDED)

    def record_failure(self, message: str) -> None:
        """Show message in the banner after an unexpected error in a handler."""
        self.ui = apply_generation_error(self.ui, message)
        self._finish(SubmitOutcome.FAILED)

    def dismiss_error(self) -> UIState:
        """Clear the error banner; images are kept."""
        self.ui = dismiss_error(self.ui)
        return self.ui

    def _finish(self, outcome: SubmitOutcome) -> SubmitOutcome:
        self.phase = FormPhase.IDLE
        self.last_outcome = outcome
        return outcome

    def _discard(self, ticket: int) -> SubmitOutcome:
        logger.info(f"Discarding outcome of submission {ticket}; {self.latest_ticket} is newer")
        return SubmitOutcome.SUPERSEDED
