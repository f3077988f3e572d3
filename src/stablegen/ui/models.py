"""Data models for StableGen UI state."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from stablegen.core.models import DEFAULT_STEPS, DEFAULT_TEXT_PROMPT
from stablegen.core.presets import DEFAULT_STYLE_PRESET


@dataclass(frozen=True)
class UIState:
    """What the page currently shows.

    Instances are immutable; the functions in :mod:`stablegen.ui.state`
    return a new UIState for every change.

    Attributes
    ----------
    images : tuple[str, ...]
        Base64 PNG payloads currently displayed, in service order
    error_message : str
        Top-level error banner text, or "" when no banner is shown
    """

    images: tuple[str, ...] = ()
    error_message: str = ""

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)

    def __repr__(self) -> str:
        """String representation for debugging (payloads omitted)."""
        return f"UIState(images={len(self.images)}, error={self.error_message!r})"


class FormPhase(str, Enum):
    """Lifecycle phase of the form controller."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class SubmitOutcome(str, Enum):
    """How a call to ``FormController.submit`` ended."""

    INVALID = "invalid"  # field errors, nothing sent
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SUPERSEDED = "superseded"  # a newer submission started first


def default_form_values() -> dict[str, Any]:
    """Initial working values for a fresh form."""
    return {
        "text_prompt": DEFAULT_TEXT_PROMPT,
        "steps": DEFAULT_STEPS,
        "style_preset": DEFAULT_STYLE_PRESET.value,
    }
