"""Unit tests for the result/error presenter."""

import re

from stablegen.core.models import Artifact
from stablegen.core.validation import FieldError
from stablegen.ui.models import UIState
from stablegen.ui.presenter import (
    EMPTY_IMAGES_HTML,
    error_visible,
    render_error,
    render_field_error,
    render_images,
)


def img_sources(markup: str) -> list[str]:
    return re.findall(r'<img [^>]*src="([^"]+)"', markup)


class TestImageSource:
    def test_matches_artifact_data_uri(self):
        artifact = Artifact(image_data="AAAA", seed=1, finish_reason="SUCCESS")
        state = UIState(images=(artifact.image_data,))

        assert img_sources(render_images(state)) == [artifact.data_uri]


class TestRenderImages:
    """Tests for render_images."""

    def test_empty_state_shows_placeholder(self, ui_state):
        assert render_images(ui_state) == EMPTY_IMAGES_HTML
        assert img_sources(render_images(ui_state)) == []

    def test_one_tag_per_image_in_order(self):
        state = UIState(images=("AAAA", "BBBB", "CCCC"))

        assert img_sources(render_images(state)) == [
            "data:image/png;base64,AAAA",
            "data:image/png;base64,BBBB",
            "data:image/png;base64,CCCC",
        ]

    def test_payload_unmodified(self):
        payload = "iVBORw0KGgo+AAAA/bbb=="
        state = UIState(images=(payload,))
        assert img_sources(render_images(state)) == [f"data:image/png;base64,{payload}"]

    def test_images_render_regardless_of_error(self):
        state = UIState(images=("AAAA",), error_message="boom")
        assert len(img_sources(render_images(state))) == 1


class TestRenderError:
    """Tests for the error banner."""

    def test_hidden_without_error(self, ui_state):
        assert render_error(ui_state) == ""
        assert error_visible(ui_state) is False

    def test_shows_message(self):
        state = UIState(error_message="Non-200 response: Unauthorized")

        assert "Non-200 response: Unauthorized" in render_error(state)
        assert error_visible(state) is True


class TestRenderFieldError:
    def test_none(self):
        assert render_field_error(None) == ""

    def test_message(self):
        error = FieldError(field="steps", code="range", message="Steps must be between 10 and 150")
        assert render_field_error(error).endswith("Steps must be between 10 and 150")
