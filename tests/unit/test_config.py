"""Unit tests for config module."""

import pytest
from pydantic import ValidationError

from token_import.core.config import (
    AppConfig,
    AppEnvironment,
    CodecConfig,
    DisplayConfig,
    LogLevel,
    ObservabilityConfig,
    Settings,
    get_settings,
    reload_settings,
)


def test_app_config_defaults():
    config = AppConfig()
    assert config.name == "cashu-token-import"
    assert config.env == AppEnvironment.LOCAL
    assert config.version == "0.1.0"
    assert config.log_level == LogLevel.INFO


def test_app_config_env_parsing():
    config = AppConfig(env="PROD")
    assert config.env == AppEnvironment.PROD


def test_app_config_log_level_parsing():
    config = AppConfig(log_level="debug")
    assert config.log_level == LogLevel.DEBUG


def test_observability_config_rejects_unknown_format():
    with pytest.raises(ValidationError):
        ObservabilityConfig(log_record_format="xml")


def test_observability_config_normalizes_format():
    assert ObservabilityConfig(log_record_format=" Console ").log_record_format == "console"


def test_codec_config_defaults():
    config = CodecConfig()
    assert config.max_token_length == 100_000
    assert config.uri_prefix_list == ["web+cashu://", "cashu://", "cashu:"]


def test_codec_config_prefixes_from_env(monkeypatch):
    monkeypatch.setenv("CODEC_URI_PREFIXES", "cashu:, ,web+cashu://")
    assert CodecConfig().uri_prefix_list == ["cashu:", "web+cashu://"]


def test_codec_config_rejects_non_positive_length():
    with pytest.raises(ValidationError):
        CodecConfig(max_token_length=0)


def test_display_config_from_env(monkeypatch):
    monkeypatch.setenv("DISPLAY_HIDE_BALANCE", "true")
    assert DisplayConfig().hide_balance is True


def test_settings_reject_debug_in_prod():
    with pytest.raises(ValidationError):
        Settings(app=AppConfig(env="prod", debug=True))


def test_settings_reject_console_logs_in_prod():
    with pytest.raises(ValidationError):
        Settings(
            app=AppConfig(env="prod"),
            observability=ObservabilityConfig(log_record_format="console"),
        )


def test_settings_allow_console_logs_locally():
    settings = Settings(observability=ObservabilityConfig(log_record_format="console"))
    assert settings.observability.log_record_format == "console"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_reload_settings_picks_up_env(monkeypatch):
    monkeypatch.setenv("CODEC_MAX_TOKEN_LENGTH", "512")
    assert reload_settings().codec.max_token_length == 512
