"""Tests for environment-based configuration."""

import importlib
import os
from unittest.mock import patch

import pytest

from common.config import config


@pytest.fixture
def reload_config():
    """Reload the config module under a patched environment, then restore it."""

    def _reload(env):
        with patch.dict(os.environ, env, clear=True), patch("dotenv.load_dotenv"):
            return importlib.reload(config)

    yield _reload
    importlib.reload(config)


class TestConfig:
    """Test configuration defaults and overrides."""

    def test_defaults(self, reload_config):
        cfg = reload_config({})

        assert cfg.CONVERSATION_URL == "https://gateway.watsonplatform.net/conversation/api"
        assert cfg.CONVERSATION_VERSION == "2017-05-26"
        assert cfg.CONVERSATION_USERNAME is None
        assert cfg.CONVERSATION_PASSWORD is None
        assert cfg.CONVERSATION_BEARER_TOKEN is None
        assert cfg.CONVERSATION_REQUEST_TIMEOUT == 150.0
        assert cfg.CONVERSATION_CONNECT_TIMEOUT == 60.0
        assert cfg.LOG_LEVEL == "INFO"
        assert cfg.APP_LOG_FILE is None

    def test_environment_overrides(self, reload_config):
        cfg = reload_config(
            {
                "CONVERSATION_URL": "https://example.test/api",
                "CONVERSATION_VERSION": "2018-02-16",
                "CONVERSATION_USERNAME": "user",
                "CONVERSATION_PASSWORD": "secret",
                "CONVERSATION_REQUEST_TIMEOUT": "30",
                "LOG_LEVEL": "DEBUG",
            }
        )

        assert cfg.CONVERSATION_URL == "https://example.test/api"
        assert cfg.CONVERSATION_VERSION == "2018-02-16"
        assert cfg.CONVERSATION_USERNAME == "user"
        assert cfg.CONVERSATION_PASSWORD == "secret"
        assert cfg.CONVERSATION_REQUEST_TIMEOUT == 30.0
        assert cfg.LOG_LEVEL == "DEBUG"


class TestGetFloatEnv:
    """Test get_float_env helper."""

    def test_empty_value_uses_default(self):
        with patch.dict(os.environ, {"SOME_TIMEOUT": ""}):
            assert config.get_float_env("SOME_TIMEOUT", 1.5) == 1.5

    def test_invalid_value(self):
        with patch.dict(os.environ, {"SOME_TIMEOUT": "soon"}):
            with pytest.raises(Exception) as exc_info:
                config.get_float_env("SOME_TIMEOUT", 1.5)

        assert "SOME_TIMEOUT must be a number" in str(exc_info.value)
