"""Core functionality for image generation.

This module provides the framework-independent pieces of StableGen:

- **StableGenConfig / config**: Configuration management using Pydantic Settings
- **StylePreset**: Closed set of style identifiers with display labels
- **GenerationRequest / GenerationResult / Artifact**: Request and response models
- **StabilityClient**: HTTPX client for the text-to-image endpoint
- **GenerationError** and subclasses: Failure taxonomy for one attempt
- **validate_form / validate_field / require_valid**: Per-field validation of raw inputs

Nothing here knows about Gradio or FastAPI; both front ends in
``stablegen.ui`` and ``stablegen.api`` sit on top of it.
"""

from stablegen.core.client import ENGINE_ID, StabilityClient
from stablegen.core.config import StableGenConfig, config
from stablegen.core.errors import (
    ApiError,
    ConfigurationError,
    GenerationError,
    ParseError,
    TransportError,
)
from stablegen.core.models import Artifact, GenerationRequest, GenerationResult
from stablegen.core.presets import StylePreset
from stablegen.core.validation import (
    FieldError,
    ValidationError,
    require_valid,
    validate_field,
    validate_form,
)

__all__ = [
    "ENGINE_ID",
    "StabilityClient",
    "StableGenConfig",
    "config",
    "ApiError",
    "ConfigurationError",
    "GenerationError",
    "ParseError",
    "TransportError",
    "Artifact",
    "GenerationRequest",
    "GenerationResult",
    "StylePreset",
    "FieldError",
    "ValidationError",
    "require_valid",
    "validate_field",
    "validate_form",
]
