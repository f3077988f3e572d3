"""Pydantic request models for the StableGen REST API.

The request body accepts any JSON value per field: type, range and enum
checks are left to :mod:`stablegen.core.validation` so the API reports the
same per-field messages as the form does.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from stablegen.core.models import DEFAULT_STEPS, DEFAULT_TEXT_PROMPT
from stablegen.core.presets import DEFAULT_STYLE_PRESET


class GenerateRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Attributes:
        text_prompt: Description of the image to generate.
        steps: Number of generation steps (10-150 after validation).
        style_preset: Style identifier (see ``GET /api/config``).
    """

    text_prompt: Any = Field(
        default=DEFAULT_TEXT_PROMPT,
        description="Subject description.",
    )
    steps: Any = Field(
        default=DEFAULT_STEPS,
        description="Number of generation steps (whole number, 10-150).",
    )
    style_preset: Any = Field(
        default=DEFAULT_STYLE_PRESET.value,
        description="Style preset identifier (e.g. 'cinematic').",
    )
