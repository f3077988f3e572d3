"""State management utilities for StableGen UI.

Each function takes the current :class:`UIState` and returns a new one. No
function here performs I/O; the controller decides which update to apply.
"""

import logging
from dataclasses import replace

from stablegen.core.models import GenerationResult

from .models import UIState

logger = logging.getLogger(__name__)


def begin_submission(state: UIState) -> UIState:
    """Clear the error banner when a valid submission starts.

    Images stay visible until a new result replaces them.
    """
    return replace(state, error_message="")


def apply_generation_result(state: UIState, result: GenerationResult) -> UIState:
    """Replace the displayed images with the result's payloads."""
    images = tuple(result.images)
    logger.info(f"Displaying {len(images)} image(s)")
    return replace(state, images=images)


def apply_generation_error(state: UIState, message: str) -> UIState:
    """Show message in the error banner. Images are left as they were."""
    logger.info(f"Showing error banner: {message}")
    return replace(state, error_message=message)


def dismiss_error(state: UIState) -> UIState:
    """Hide the error banner."""
    return replace(state, error_message="")
