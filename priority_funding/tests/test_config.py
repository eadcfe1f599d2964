"""Tests for environment configuration validation."""

import os
import pytest
from unittest.mock import patch

from priority_funding.tests.factories import clean_env as _clean_env


class TestConfigValidation:
    """Test startup config validation."""

    def test_defaults_without_environment(self, tmp_path, monkeypatch):
        """No variables set → documented defaults."""
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, _clean_env(), clear=True):
            from priority_funding.config.config import validate_config

            config = validate_config()
            assert config.total_funding_pool == 1_000_000
            assert config.default_country == "Algeria"
            assert config.regions_file is None
            assert config.regions_url is None
            assert config.weights_file is None
            assert config.strict_weights is False
            assert config.strict_allocation is False
            assert config.log_level == "INFO"

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = _clean_env(
            TOTAL_FUNDING_POOL="250000",
            DEFAULT_COUNTRY="Mali",
            REGIONS_URL="https://data.example.org/regions.json",
            STRICT_WEIGHTS="true",
            STRICT_ALLOCATION="1",
            LOG_LEVEL="debug",
        )
        with patch.dict(os.environ, env, clear=True):
            from priority_funding.config.config import validate_config

            config = validate_config()
            assert config.total_funding_pool == 250_000
            assert config.default_country == "Mali"
            assert config.regions_url == "https://data.example.org/regions.json"
            assert config.strict_weights is True
            assert config.strict_allocation is True
            assert config.log_level == "DEBUG"

    def test_dotenv_file_is_read(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("TOTAL_FUNDING_POOL=42\n")
        with patch.dict(os.environ, _clean_env(), clear=True):
            from priority_funding.config.config import validate_config

            assert validate_config().total_funding_pool == 42

    @pytest.mark.parametrize("pool", ["0", "-100", "inf", "lots"])
    def test_invalid_pool_raises_error(self, pool, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, _clean_env(TOTAL_FUNDING_POOL=pool), clear=True):
            from priority_funding.config.config import validate_config

            with pytest.raises(ValueError) as exc_info:
                validate_config()
            assert "TOTAL_FUNDING_POOL" in str(exc_info.value)

    def test_all_invalid_variables_reported(self, tmp_path, monkeypatch):
        """Every invalid variable is named, not just the first one."""
        monkeypatch.chdir(tmp_path)
        env = _clean_env(TOTAL_FUNDING_POOL="-1", LOG_LEVEL="chatty")
        with patch.dict(os.environ, env, clear=True):
            from priority_funding.config.config import validate_config

            with pytest.raises(ValueError) as exc_info:
                validate_config()
            message = str(exc_info.value)
            assert "TOTAL_FUNDING_POOL" in message
            assert "LOG_LEVEL" in message
