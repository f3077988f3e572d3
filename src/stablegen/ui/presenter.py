"""Rendering of UIState for the Gradio page.

Everything here is a pure function of its arguments and returns plain
strings/bools; the handlers wrap them in ``gr.update`` calls.
"""

import html

from stablegen.core.models import png_data_uri
from stablegen.core.validation import FieldError

from .models import UIState

EMPTY_IMAGES_HTML = '<div class="stablegen-empty"><em>Generated images will appear here</em></div>'


def render_images(state: UIState) -> str:
    """Render every image in state order as an ``<img>`` tag.

    Args:
        state: Current UI state

    Returns:
        HTML fragment; a placeholder when there are no images
    """
    if not state.images:
        return EMPTY_IMAGES_HTML

    tags = [
        f'<img class="stablegen-image" src="{html.escape(png_data_uri(image_data))}" '
        f'alt="Generated image {index + 1}"/>'
        for index, image_data in enumerate(state.images)
    ]
    return '<div class="stablegen-images">' + "".join(tags) + "</div>"


def render_error(state: UIState) -> str:
    """Markdown for the error banner ("" when there is no error)."""
    if not state.has_error:
        return ""
    return f"❌ **Error**\n\n{state.error_message}"


def error_visible(state: UIState) -> bool:
    """Whether the banner (and its dismiss button) should be shown."""
    return state.has_error


def render_field_error(error: FieldError | None) -> str:
    """Inline message shown under an input."""
    if error is None:
        return ""
    return f"⚠️ {error.message}"
