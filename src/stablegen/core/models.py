"""Pydantic models for the generation request and the parsed API response.

Models
------
GenerationRequest
    Validated user input. Field constraints here are the single source of
    truth for the form schema; :mod:`stablegen.core.validation` translates
    their failures into per-field messages.
Artifact
    One generated image with its seed and finish reason.
GenerationResult
    Ordered artifacts from a successful response.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from stablegen.core.presets import DEFAULT_STYLE_PRESET, StylePreset

MIN_STEPS = 10
MAX_STEPS = 150
DEFAULT_STEPS = 50
DEFAULT_TEXT_PROMPT = ""

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


def png_data_uri(image_data: str) -> str:
    """Inline PNG source for a base64 payload."""
    return f"{PNG_DATA_URI_PREFIX}{image_data}"


class GenerationRequest(BaseModel):
    """Validated input for one text-to-image call.

    Attributes:
        text_prompt: Description of the subject. Must contain non-whitespace text.
        steps: Number of diffusion steps (10-150 inclusive).
        style_preset: Visual style applied by the service.
    """

    model_config = ConfigDict(frozen=True)

    text_prompt: str = Field(
        default=DEFAULT_TEXT_PROMPT,
        validate_default=True,
        description="Subject description sent as the single text prompt.",
    )
    steps: int = Field(
        default=DEFAULT_STEPS,
        ge=MIN_STEPS,
        le=MAX_STEPS,
        description="Number of generation steps.",
    )
    style_preset: StylePreset = Field(
        default=DEFAULT_STYLE_PRESET,
        description="Style preset identifier.",
    )

    @field_validator("text_prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("required", "Prompt must not be empty")
        return v

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for ``POST .../text-to-image``.

        The prompt is passed through unmodified (no stripping).
        """
        return {
            "text_prompts": [{"text": self.text_prompt}],
            "steps": self.steps,
            "style_preset": self.style_preset.value,
        }


class Artifact(BaseModel):
    """A single image returned by the service.

    Wire names are ``base64``, ``seed`` and ``finishReason``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    image_data: str = Field(alias="base64")
    seed: int
    finish_reason: str = Field(alias="finishReason")

    @property
    def data_uri(self) -> str:
        """Inline PNG source for an ``<img>`` tag."""
        return png_data_uri(self.image_data)


class GenerationResult(BaseModel):
    """Parsed body of a successful generation response."""

    model_config = ConfigDict(frozen=True)

    artifacts: list[Artifact]

    @property
    def images(self) -> list[str]:
        """Base64 payloads in the order returned by the service."""
        return [artifact.image_data for artifact in self.artifacts]
