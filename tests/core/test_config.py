"""Tests for ssi.core.config - CoreSettings and global config management.

Tests cover:
- Settings loading with defaults
- Environment variable overrides
- Validation of names and bounds
- Singleton behavior (get_config / clear_config_cache)
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ssi.core.config import (
    CoreSettings,
    clear_config_cache,
    get_config,
)

# ============================================================================
# CoreSettings - Default Values
# ============================================================================


class TestCoreSettingsDefaults:
    """Test that CoreSettings loads with correct default values."""

    def test_key_generation_defaults(self):
        settings = CoreSettings()

        assert settings.default_algorithm == "bip340"
        assert settings.default_network == "bitcoin"
        assert settings.vanity_max_attempts is None
        assert settings.secret is None

    def test_logging_defaults(self):
        settings = CoreSettings()

        assert settings.log_level == "INFO"
        assert settings.log_format == ""
        assert settings.log_file is None


# ============================================================================
# CoreSettings - Environment Overrides
# ============================================================================


class TestCoreSettingsEnv:
    """Test that SSI_ environment variables override defaults."""

    def test_key_generation_overrides(self, monkeypatch):
        monkeypatch.setenv("SSI_DEFAULT_ALGORITHM", "Ed25519")
        monkeypatch.setenv("SSI_DEFAULT_NETWORK", " TESTNET ")
        monkeypatch.setenv("SSI_VANITY_MAX_ATTEMPTS", "500000")
        monkeypatch.setenv("SSI_SECRET", "ssi-priv:abc")

        settings = CoreSettings()

        assert settings.default_algorithm == "ed25519"
        assert settings.default_network == "testnet"
        assert settings.vanity_max_attempts == 500000
        assert settings.secret == "ssi-priv:abc"

    def test_logging_overrides(self, monkeypatch, tmp_path):
        log_file = tmp_path / "ssi.log"
        monkeypatch.setenv("SSI_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SSI_LOG_FORMAT", "json")
        monkeypatch.setenv("SSI_LOG_FILE", str(log_file))

        settings = CoreSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.log_file == str(log_file)

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_rejects_non_positive_attempts(self, monkeypatch, value):
        monkeypatch.setenv("SSI_VANITY_MAX_ATTEMPTS", value)
        with pytest.raises(ValidationError):
            CoreSettings()

    def test_rejects_non_integer_attempts(self, monkeypatch):
        monkeypatch.setenv("SSI_VANITY_MAX_ATTEMPTS", "lots")
        with pytest.raises(ValidationError):
            CoreSettings()


# ============================================================================
# Global Config Singleton
# ============================================================================


class TestGetConfig:
    """Test the get_config / clear_config_cache pair."""

    def test_returns_same_instance(self):
        assert get_config() is get_config()

    def test_cache_survives_env_change(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("SSI_DEFAULT_NETWORK", "regtest")
        assert get_config() is first
        assert get_config().default_network == "bitcoin"

    def test_clear_picks_up_env_change(self, monkeypatch):
        get_config()
        monkeypatch.setenv("SSI_DEFAULT_NETWORK", "regtest")
        clear_config_cache()
        assert get_config().default_network == "regtest"
