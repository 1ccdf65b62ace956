"""Configuration management for the token import pipeline.

Configuration is loaded from environment variables, one settings group
per env prefix.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URI_PREFIXES = "web+cashu://,cashu://,cashu:"


class AppEnvironment(StrEnum):
    LOCAL = "local"
    TEST = "test"
    PROD = "prod"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseSettings):
    name: str = Field(default="cashu-token-import")
    env: AppEnvironment = Field(default=AppEnvironment.LOCAL)
    version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    log_level: LogLevel = Field(default=LogLevel.INFO)

    model_config = SettingsConfigDict(env_prefix="APP_")

    @field_validator("env", mode="before")
    @classmethod
    def validate_env(cls, v: str | AppEnvironment) -> AppEnvironment:
        if isinstance(v, AppEnvironment):
            return v
        return AppEnvironment(v.strip().lower())

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        if isinstance(v, LogLevel):
            return v
        return LogLevel(v.strip().upper())


class ObservabilityConfig(BaseSettings):
    log_record_format: str = Field(default="json")

    model_config = SettingsConfigDict(env_prefix="OBSERVABILITY_")

    @field_validator("log_record_format", mode="after")
    @classmethod
    def validate_log_record_format(cls, v: str) -> str:
        normalized = v.strip().lower()
        if normalized not in {"json", "console"}:
            raise ValueError(f"Unsupported log record format: {v}")
        return normalized


class CodecConfig(BaseSettings):
    max_token_length: int = Field(default=100_000, gt=0)
    uri_prefixes: str = Field(default=DEFAULT_URI_PREFIXES)

    model_config = SettingsConfigDict(env_prefix="CODEC_")

    @property
    def uri_prefix_list(self) -> list[str]:
        return [prefix.strip() for prefix in self.uri_prefixes.split(",") if prefix.strip()]


class DisplayConfig(BaseSettings):
    hide_balance: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="DISPLAY_")


class Settings(BaseSettings):
    app: AppConfig = Field(default_factory=AppConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Settings:
        if self.app.env == AppEnvironment.PROD and self.app.debug:
            raise ValueError("Debug mode is not allowed in production")
        if self.app.env == AppEnvironment.PROD and self.observability.log_record_format != "json":
            raise ValueError(
                "Structured JSON logging is required in production. "
                f"Current format: {self.observability.log_record_format}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()
