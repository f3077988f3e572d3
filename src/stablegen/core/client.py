"""HTTP client for the Stability text-to-image endpoint, built on HTTPX.

One call is one ``POST``: no retries, no streaming. The whole body is read
before parsing. Failures are mapped onto the taxonomy in
:mod:`stablegen.core.errors`.

Usage Example
-------------
    from stablegen.core.client import StabilityClient
    from stablegen.core.config import config
    from stablegen.core.models import GenerationRequest

    with StabilityClient(config) as client:
        result = client.generate(GenerationRequest(text_prompt="a red fox"))
        print(result.images)
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from stablegen.core.config import StableGenConfig
from stablegen.core.errors import ApiError, ConfigurationError, ParseError, TransportError
from stablegen.core.models import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

ENGINE_ID = "stable-diffusion-v1-5"


class StabilityClient:
    """Synchronous client for ``/v1/generation/{engine}/text-to-image``.

    Args:
        config: Settings providing ``api_host``, ``api_key`` and ``request_timeout``
        transport: Optional custom transport (useful for testing)
    """

    def __init__(
        self,
        config: StableGenConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        self._client = httpx.Client(timeout=config.request_timeout, transport=transport)

    def close(self) -> None:
        """Close the underlying HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> StabilityClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def url(self) -> str:
        """Full endpoint URL for the configured host."""
        return f"{self.config.api_host}/v1/generation/{ENGINE_ID}/text-to-image"

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Send one generation request and parse the artifacts.

        Args:
            request: Validated generation input

        Returns:
            GenerationResult with artifacts in service order

        Raises:
            ConfigurationError: No API key configured (nothing is sent)
            TransportError: The endpoint could not be reached
            ApiError: The service returned a status other than 200
            ParseError: The body is not JSON of the expected shape
        """
        api_key = self.config.api_key
        if not api_key:
            raise ConfigurationError("Missing Stability API key.")

        logger.info(
            f"Requesting generation: engine={ENGINE_ID}, steps={request.steps}, "
            f"style={request.style_preset.value}"
        )

        try:
            response = self._client.post(
                self.url,
                headers=self._headers(api_key),
                json=request.to_payload(),
            )
        except httpx.RequestError as e:
            logger.error(f"Could not reach {self.url}: {e}")
            raise TransportError(f"Could not reach the Stability API: {e}") from e

        if response.status_code != 200:
            logger.warning(f"Generation failed with HTTP {response.status_code}")
            raise ApiError(response.status_code, response.reason_phrase)

        try:
            body = response.json()
        except ValueError as e:
            raise ParseError(f"Response body is not valid JSON: {e}") from e

        try:
            result = GenerationResult.model_validate(body)
        except ValidationError as e:
            raise ParseError(f"Unexpected response shape: {e.error_count()} error(s)") from e

        logger.info(f"Generation returned {len(result.artifacts)} artifact(s)")
        return result
