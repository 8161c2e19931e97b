# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Core configuration - centralized config for the ssi package.

All environment-based configuration should flow through this module.
This provides a single source of truth and consistent defaults.

Usage:
    from ssi.core.config import get_config
    config = get_config()

    # Access settings
    algorithm = config.default_algorithm
    log_level = config.log_level
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CoreSettings(BaseSettings):
    """Core configuration settings for SSI.

    Settings can be configured via environment variables with the
    ``SSI_`` prefix, or through a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # KEY GENERATION SETTINGS
    # ==========================================================================

    default_algorithm: str = Field(
        default="bip340",
        description="Signature algorithm used when none is given (bip340, ed25519)",
        validation_alias="SSI_DEFAULT_ALGORITHM",
    )
    default_network: str = Field(
        default="bitcoin",
        description="Network tag used when none is given",
        validation_alias="SSI_DEFAULT_NETWORK",
    )
    vanity_max_attempts: int | None = Field(
        default=None,
        description="Upper bound on vanity key candidates (unbounded if unset)",
        validation_alias="SSI_VANITY_MAX_ATTEMPTS",
    )
    secret: str | None = Field(
        default=None,
        description="Secret key in ssi-priv text form used for signing",
        validation_alias="SSI_SECRET",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="SSI_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="SSI_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="SSI_LOG_FILE",
    )

    @field_validator("default_algorithm", "default_network")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("vanity_max_attempts")
    @classmethod
    def _positive_attempts(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("vanity_max_attempts must be positive")
        return value


_config: CoreSettings | None = None


def get_config() -> CoreSettings:
    """Get the global configuration instance.

    Returns:
        The singleton CoreSettings instance.
    """
    global _config
    if _config is None:
        _config = CoreSettings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
