"""Tests for environment-driven server configuration."""

import pytest

from huck import config as config_module
from huck.config import ServerConfig, get_config, reset_config


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("HUCK_HOST", "HUCK_PORT", "HUCK_LOG_LEVEL", "HUCK_CORS_ORIGINS", "HUCK_DEFAULT_GRID_SIZE"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()


class TestServerConfig:
    """Tests for ServerConfig defaults and overrides."""

    def test_defaults(self, clean_env):
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.log_level == "INFO"
        assert config.cors_origins == ["*"]
        assert config.default_grid_size == 1.0
        assert config.validate() == []

    def test_env_overrides(self, clean_env):
        clean_env.setenv("HUCK_PORT", "8080")
        clean_env.setenv("HUCK_LOG_LEVEL", "debug")
        clean_env.setenv("HUCK_CORS_ORIGINS", "http://localhost:5173, http://127.0.0.1:5173")
        clean_env.setenv("HUCK_DEFAULT_GRID_SIZE", "2.5")
        config = ServerConfig.from_env()
        assert config.port == 8080
        assert config.log_level == "DEBUG"
        assert config.cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
        assert config.default_grid_size == 2.5

    def test_validate_reports_errors(self, clean_env):
        config = ServerConfig(port=0, log_level="LOUD", cors_origins=[], default_grid_size=0.0)
        errors = config.validate()
        assert len(errors) == 4

    def test_singleton(self, clean_env):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert config_module._config is None
        assert get_config() is not first
