"""Shared pytest fixtures for StableGen tests."""

import json
from collections.abc import Callable

import httpx
import pytest

from stablegen.core.client import StabilityClient
from stablegen.core.config import StableGenConfig
from stablegen.core.models import GenerationRequest, GenerationResult
from stablegen.core.presets import StylePreset
from stablegen.ui.controller import FormController
from stablegen.ui.models import UIState


class FakeBackend:
    """Stand-in for StabilityClient that records requests.

    Each call pops the next entry of ``responses``: a GenerationResult is
    returned, an exception is raised, and a callable is invoked with the
    request (its return value is then treated the same way).
    """

    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.requests: list[GenerationRequest] = []

    def generate(self, request: GenerationRequest) -> GenerationResult:
        self.requests.append(request)
        response = self.responses.pop(0)
        if callable(response) and not isinstance(response, GenerationResult):
            response = response(request)
        if isinstance(response, Exception):
            raise response
        return response


def make_result(*images: str) -> GenerationResult:
    """Build a GenerationResult with one artifact per payload."""
    return GenerationResult.model_validate(
        {
            "artifacts": [
                {"base64": image, "seed": 1000 + i, "finishReason": "SUCCESS"}
                for i, image in enumerate(images)
            ]
        }
    )


@pytest.fixture
def test_config(monkeypatch) -> StableGenConfig:
    """Configuration with a dummy key and a fake host.

    Returns:
        StableGenConfig instance for testing
    """
    for var in ("STABLEGEN_API_KEY", "STABLEGEN_API_HOST", "STABLEGEN_REQUEST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    return StableGenConfig(
        _env_file=None,
        api_host="https://stability.test",
        api_key="test-key",
    )


@pytest.fixture
def keyless_config(monkeypatch) -> StableGenConfig:
    """Configuration without an API key."""
    monkeypatch.delenv("STABLEGEN_API_KEY", raising=False)
    return StableGenConfig(_env_file=None, api_host="https://stability.test")


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by transports built with ``make_transport``."""
    return []


@pytest.fixture
def make_transport(
    recorded_requests: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """Factory for an httpx.MockTransport that records every request.

    Usage:
        transport = make_transport(200, json={"artifacts": []})
        transport = make_transport(handler=lambda request: ...)
    """

    def factory(status_code: int = 200, *, handler=None, **response_kwargs):
        def record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.MockTransport(record)

    return factory


@pytest.fixture
def success_body() -> dict:
    """A 200 body with two artifacts."""
    return {
        "artifacts": [
            {"base64": "AAAA", "seed": 1234, "finishReason": "SUCCESS"},
            {"base64": "BBBB", "seed": 5678, "finishReason": "CONTENT_FILTERED"},
        ]
    }


@pytest.fixture
def valid_request() -> GenerationRequest:
    """The red fox request used throughout the tests."""
    return GenerationRequest(
        text_prompt="a red fox",
        steps=75,
        style_preset=StylePreset.CINEMATIC,
    )


@pytest.fixture
def stability_client(test_config, make_transport, success_body):
    """StabilityClient answering every request with ``success_body``."""
    client = StabilityClient(test_config, transport=make_transport(200, json=success_body))
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing."""
    return UIState()


@pytest.fixture
def controller() -> FormController:
    """Controller holding a valid red fox form."""
    form = FormController()
    form.set_field("text_prompt", "a red fox")
    form.set_field("steps", 75)
    form.set_field("style_preset", "cinematic")
    return form


def body_of(request: httpx.Request) -> dict:
    """Decode a recorded request's JSON body."""
    return json.loads(request.content)


