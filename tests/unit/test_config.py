"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from provider_console.config.defaults import get_default_config
from provider_console.config.loader import ConfigLoader
from provider_console.config.validation import ConfigValidator
from provider_console.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.instruments.page_size == 120
        assert config.notices.dismiss_after_seconds == 4.0
        assert config.api.base_url.startswith("http")


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create(tmp_path)
        assert isinstance(loader.config_dir, Path)
        assert loader.config_file == tmp_path / "console.yaml"

    def test_defaults_only(self, tmp_path) -> None:
        """Missing console.yaml yields defaults."""
        config = ConfigLoader.create(tmp_path).load()
        assert config == get_default_config()

    def test_file_overrides_defaults(self, tmp_path) -> None:
        (tmp_path / "console.yaml").write_text(
            "api:\n"
            "  base_url: https://admin.example.com/api\n"
            "instruments:\n"
            "  page_size: 50\n"
        )

        config = ConfigLoader.create(tmp_path).load()

        assert config.api.base_url == "https://admin.example.com/api"
        assert config.api.timeout_seconds == 10.0
        assert config.instruments.page_size == 50

    def test_explicit_overrides_win(self, tmp_path) -> None:
        (tmp_path / "console.yaml").write_text("instruments:\n  page_size: 50\n")

        config = ConfigLoader.create(tmp_path).load({"instruments": {"page_size": 10}})

        assert config.instruments.page_size == 10

    def test_empty_file(self, tmp_path) -> None:
        (tmp_path / "console.yaml").write_text("")

        assert ConfigLoader.create(tmp_path).load() == get_default_config()

    def test_invalid_values_raise(self, tmp_path) -> None:
        (tmp_path / "console.yaml").write_text("instruments:\n  page_size: 0\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load()

        assert "instruments.page_size" in str(exc_info.value)
        assert exc_info.value.errors[0].field == "instruments.page_size"

    def test_non_mapping_file_rejected(self, tmp_path) -> None:
        (tmp_path / "console.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load()

    def test_unknown_keys_ignored(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).load({"notices": {"colour": "green"}})

        assert config.notices.dismiss_after_seconds == 4.0


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self, tmp_path) -> None:
        merged = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(merged) == []

    @pytest.mark.parametrize("value", ["localhost:8080", "ftp://host", 42])
    def test_invalid_base_url(self, value) -> None:
        errors = ConfigValidator.validate_api_params({"base_url": value})
        assert len(errors) == 1
        assert errors[0].field == "api.base_url"

    def test_invalid_timeout(self) -> None:
        errors = ConfigValidator.validate_api_params({"timeout_seconds": 0})
        assert errors[0].message == "Must be a positive number"

    def test_invalid_headers(self) -> None:
        errors = ConfigValidator.validate_api_params({"headers": {"X-Token": 5}})
        assert errors[0].field == "api.headers"

    @pytest.mark.parametrize("value", [0, -1, 1.5, True, "120"])
    def test_invalid_page_size(self, value) -> None:
        errors = ConfigValidator.validate_instrument_params({"page_size": value})
        assert len(errors) == 1

    def test_negative_dismiss_delay(self) -> None:
        errors = ConfigValidator.validate_notice_params({"dismiss_after_seconds": -1})
        assert errors[0].field == "notices.dismiss_after_seconds"

    def test_invalid_log_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert [e.field for e in errors] == ["logging.level", "logging.format_json"]

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"api": "http://x"})
        assert errors[0].field == "api"
