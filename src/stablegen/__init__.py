"""StableGen - Text-to-image web form for the Stability AI API."""

__version__ = "0.1.0"

from stablegen.core.client import StabilityClient
from stablegen.core.config import StableGenConfig, config
from stablegen.core.models import GenerationRequest, GenerationResult
from stablegen.core.presets import StylePreset

__all__ = [
    "StabilityClient",
    "StableGenConfig",
    "config",
    "GenerationRequest",
    "GenerationResult",
    "StylePreset",
]
