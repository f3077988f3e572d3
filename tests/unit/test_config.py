"""Tests for stablegen.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the STABLEGEN_ prefix.
- Pydantic validation constraints (port range, host scheme, timeout).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from stablegen.core.config import DEFAULT_API_HOST, StableGenConfig


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any STABLEGEN_* variables inherited from the shell."""
    for var in (
        "STABLEGEN_API_HOST",
        "STABLEGEN_API_KEY",
        "STABLEGEN_REQUEST_TIMEOUT",
        "STABLEGEN_SERVER_HOST",
        "STABLEGEN_SERVER_PORT",
        "STABLEGEN_GRADIO_SHARE",
        "STABLEGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


class TestConfigDefaults:
    """Verify that StableGenConfig provides sensible defaults."""

    def test_default_api_host(self, clean_env):
        cfg = StableGenConfig(_env_file=None)
        assert cfg.api_host == DEFAULT_API_HOST == "https://api.stability.ai"

    def test_no_api_key_by_default(self, clean_env):
        cfg = StableGenConfig(_env_file=None)
        assert cfg.api_key is None
        assert cfg.has_api_key is False

    def test_no_timeout_by_default(self, clean_env):
        assert StableGenConfig(_env_file=None).request_timeout is None

    def test_default_server(self, clean_env):
        cfg = StableGenConfig(_env_file=None)
        assert cfg.server_host == "0.0.0.0"
        assert cfg.server_port == 7860
        assert cfg.gradio_share is False

    def test_default_log_level(self, clean_env):
        assert StableGenConfig(_env_file=None).log_level == "INFO"


class TestConfigEnvironment:
    """Verify STABLEGEN_ environment overrides."""

    def test_api_key_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("STABLEGEN_API_KEY", "sk-from-env")
        cfg = StableGenConfig(_env_file=None)
        assert cfg.api_key == "sk-from-env"
        assert cfg.has_api_key is True

    def test_api_host_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("STABLEGEN_API_HOST", "http://localhost:9000/")
        cfg = StableGenConfig(_env_file=None)
        assert cfg.api_host == "http://localhost:9000"

    def test_port_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("STABLEGEN_SERVER_PORT", "8080")
        assert StableGenConfig(_env_file=None).server_port == 8080

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("STABLEGEN_API_KEY=sk-dotenv\nSTABLEGEN_REQUEST_TIMEOUT=12.5\n")

        cfg = StableGenConfig(_env_file=env_file)

        assert cfg.api_key == "sk-dotenv"
        assert cfg.request_timeout == 12.5


class TestConfigValidation:
    """Verify field constraints."""

    def test_blank_api_key_is_missing(self, clean_env):
        cfg = StableGenConfig(_env_file=None, api_key="   ")
        assert cfg.api_key is None
        assert cfg.has_api_key is False

    def test_api_key_is_stripped(self, clean_env):
        assert StableGenConfig(_env_file=None, api_key=" sk-1 ").api_key == "sk-1"

    def test_api_host_requires_scheme(self, clean_env):
        with pytest.raises(ValidationError):
            StableGenConfig(_env_file=None, api_host="api.stability.ai")

    @pytest.mark.parametrize("port", [80, 70000])
    def test_port_range(self, clean_env, port):
        with pytest.raises(ValidationError):
            StableGenConfig(_env_file=None, server_port=port)

    def test_timeout_must_be_positive(self, clean_env):
        with pytest.raises(ValidationError):
            StableGenConfig(_env_file=None, request_timeout=0)

    def test_log_level_literal(self, clean_env):
        with pytest.raises(ValidationError):
            StableGenConfig(_env_file=None, log_level="VERBOSE")
