"""Gradio event handlers for the generation form.

Handlers receive raw component values plus the session's
:class:`FormController` and return component updates followed by the
controller, which Gradio stores back into ``gr.State``.
"""

import logging
from typing import Any

import gradio as gr

from .controller import FormController, GenerationBackend
from .presenter import error_visible, render_error, render_field_error, render_images

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Check logs for details."


def render_outputs(controller: FormController) -> tuple:
    """Build updates for every output of a submit.

    Returns:
        Tuple of (images_html, banner_group_update, banner_text,
        prompt_error_update, steps_error_update, style_error_update)
    """
    ui = controller.ui
    return (
        render_images(ui),
        gr.update(visible=error_visible(ui)),
        render_error(ui),
        _field_error_update(controller, "text_prompt"),
        _field_error_update(controller, "steps"),
        _field_error_update(controller, "style_preset"),
    )


def _field_error_update(controller: FormController, name: str) -> dict:
    error = controller.field_errors.get(name)
    return gr.update(value=render_field_error(error), visible=error is not None)


def update_field(name: str, value: Any, controller: FormController) -> tuple[dict, FormController]:
    """Store a field edit and refresh that field's inline error.

    Args:
        name: Form field name
        value: New component value
        controller: Session controller

    Returns:
        Tuple of (field_error_update, controller)
    """
    controller.set_field(name, value)
    return _field_error_update(controller, name), controller


def handle_prompt_change(value: str, controller: FormController) -> tuple[dict, FormController]:
    return update_field("text_prompt", value, controller)


def handle_steps_change(value: float, controller: FormController) -> tuple[dict, FormController]:
    return update_field("steps", value, controller)


def handle_style_change(value: str, controller: FormController) -> tuple[dict, FormController]:
    return update_field("style_preset", value, controller)


def submit_form(
    text_prompt: str,
    steps: float,
    style_preset: str,
    controller: FormController,
    client: GenerationBackend,
) -> tuple:
    """Handle the Generate button.

    Args:
        text_prompt: Prompt textbox value
        steps: Steps slider value
        style_preset: Style dropdown value
        controller: Session controller
        client: Generation client bound by the app

    Returns:
        render_outputs(...) followed by the controller
    """
    try:
        controller.set_field("text_prompt", text_prompt)
        controller.set_field("steps", steps)
        controller.set_field("style_preset", style_preset)
        outcome = controller.submit(client)
        logger.info(f"Submit finished: {outcome.value}")
    except Exception as e:
        # Unexpected error
        logger.error(f"Error generating images: {e}", exc_info=True)
        controller.record_failure(f"{UNEXPECTED_ERROR_MESSAGE}\n\n`{e}`")

    return (*render_outputs(controller), controller)


def handle_dismiss_error(controller: FormController) -> tuple[dict, str, FormController]:
    """Hide the error banner; images are untouched.

    Returns:
        Tuple of (banner_group_update, banner_text, controller)
    """
    controller.dismiss_error()
    return gr.update(visible=False), render_error(controller.ui), controller
