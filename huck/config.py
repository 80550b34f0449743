"""
Server configuration.

Controls how the API server binds, logs and answers cross-origin requests.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class ServerConfig:
    """Configuration for the heat-map API server."""

    # Bind settings
    host: str = field(default_factory=lambda: os.getenv("HUCK_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("HUCK_PORT", "3000")))

    log_level: str = field(default_factory=lambda: os.getenv("HUCK_LOG_LEVEL", "INFO").upper())

    # "*" lets the static frontend be opened straight from the file system
    cors_origins: list[str] = field(
        default_factory=lambda: _split_origins(os.getenv("HUCK_CORS_ORIGINS", "*"))
    )

    # Yards per cell when a request does not say
    default_grid_size: float = field(
        default_factory=lambda: float(os.getenv("HUCK_DEFAULT_GRID_SIZE", "1.0"))
    )

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 0 < self.port < 65536:
            errors.append(f"HUCK_PORT must be between 1 and 65535, got {self.port}")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"HUCK_LOG_LEVEL is not a logging level: {self.log_level}")
        if self.default_grid_size <= 0:
            errors.append("HUCK_DEFAULT_GRID_SIZE must be positive")
        if not self.cors_origins:
            errors.append("HUCK_CORS_ORIGINS must list at least one origin")
        return errors


# Singleton config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global server configuration."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() rereads the environment.

    Useful for testing.
    """
    global _config
    _config = None
