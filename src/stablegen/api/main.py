"""StableGen — FastAPI Application.

This module defines the FastAPI ``app`` instance, the JSON API routes, and
the ``main()`` CLI function that mounts the Gradio page and launches the
uvicorn server.

Endpoints
---------
========  ==================  ==========================================
Method    Path                Purpose
========  ==================  ==========================================
GET       ``/api/config``     Presets, step bounds, defaults, key status
POST      ``/api/generate``   Validate input and run one generation
========  ==================  ==========================================

When started through ``main()`` the Gradio form is served at ``/``.

Usage
-----
CLI (installed entry point)::

    stablegen

Direct invocation::

    python -m stablegen.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from stablegen import __version__
from stablegen.api.models import GenerateRequest
from stablegen.core.client import ENGINE_ID, StabilityClient
from stablegen.core.config import config
from stablegen.core.errors import ConfigurationError, GenerationError
from stablegen.core.models import DEFAULT_STEPS, MAX_STEPS, MIN_STEPS
from stablegen.core.presets import DEFAULT_STYLE_PRESET, StylePreset
from stablegen.core.validation import ValidationError, require_valid

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifecycle: one HTTP client per process.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the generation client on startup and close it on shutdown.

    A client already placed on ``app.state`` by :func:`main` (and shared with
    the mounted Gradio page) is used instead of creating a second one.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    if getattr(app.state, "generation_client", None) is None:
        app.state.generation_client = StabilityClient(config)
    logger.info("StabilityClient initialised.")

    yield

    app.state.generation_client.close()
    app.state.generation_client = None
    logger.info("StabilityClient closed on shutdown.")


app = FastAPI(
    title="StableGen",
    description="Text-to-image generation against the Stability AI REST API.",
    version=__version__,
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config() -> dict:
    """Return what a client needs to build the form.

    The API key itself is never returned, only whether one is configured.

    Returns:
        Dictionary with ``version``, ``engine_id``, ``steps`` (min, max,
        default), ``default_style_preset``, ``style_presets`` and
        ``api_key_configured``.
    """
    return {
        "version": __version__,
        "engine_id": ENGINE_ID,
        "steps": {"min": MIN_STEPS, "max": MAX_STEPS, "default": DEFAULT_STEPS},
        "default_style_preset": DEFAULT_STYLE_PRESET.value,
        "style_presets": [{"id": p.value, "label": p.label} for p in StylePreset],
        "api_key_configured": config.has_api_key,
    }


@app.post("/api/generate")
def generate_images(req: GenerateRequest) -> dict:
    """Validate the input and run one generation.

    Declared as a plain ``def`` so FastAPI runs the blocking HTTP call in its
    thread pool.

    Args:
        req: Request payload.

    Returns:
        Dictionary with ``images`` (PNG data URIs in service order) and
        ``artifacts`` (``base64``, ``seed``, ``finish_reason`` per image).

    Raises:
        HTTPException: 422 with per-field messages for invalid input, 503
            when no API key is configured, 502 for any upstream failure.
    """
    try:
        request = require_valid(req.model_dump())
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"field_errors": {name: err.message for name, err in e.errors.items()}},
        ) from e

    client: StabilityClient = app.state.generation_client

    try:
        result = client.generate(request)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    return {
        "images": [artifact.data_uri for artifact in result.artifacts],
        "artifacts": [
            {
                "base64": artifact.image_data,
                "seed": artifact.seed,
                "finish_reason": artifact.finish_reason,
            }
            for artifact in result.artifacts
        ],
    }


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Mount the Gradio form at ``/`` and launch the uvicorn ASGI server.

    Reads host and port from :data:`~stablegen.core.config.config`
    (``STABLEGEN_SERVER_HOST`` / ``STABLEGEN_SERVER_PORT``). Defaults to
    ``0.0.0.0:7860``.
    """
    import gradio as gr
    import uvicorn

    from stablegen.ui.app import create_ui

    # The page and the JSON API share one client, closed by the lifespan
    client = StabilityClient(config)
    app.state.generation_client = client
    server = gr.mount_gradio_app(app, create_ui(client), path="/")

    logger.info(f"Launching StableGen on {config.server_host}:{config.server_port}")
    uvicorn.run(
        server,
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
