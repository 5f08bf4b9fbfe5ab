"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values. The loaded
settings are frozen and handed to the container; no handler reads
the environment directly.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from orchestrator.shared import EnumEnvironment, EnumLogLevel


class UpstreamSettings(BaseSettings):
    """Base URLs of the upstream services."""

    acquire_url: str = Field(
        default="http://acquire:3001",
        description="Acquisition service base URL",
        validation_alias=AliasChoices("ACQUIRE_URL", "UPSTREAM_ACQUIRE_URL"),
    )
    predict_url: str = Field(
        default="http://predict2:3002",
        description="Prediction service base URL",
        validation_alias=AliasChoices("PREDICT_URL", "UPSTREAM_PREDICT_URL"),
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore", frozen=True)


class ServerSettings(BaseSettings):
    """HTTP server and service descriptor settings."""

    service: str = Field(default="orchestrator", description="Service identifier")
    title: str = Field(default="Prediction Orchestrator", description="API title")
    description: str = Field(
        default="Microservice orchestrator: Acquire -> Predict",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(
        default="0.0.0.0",
        description="Interface to bind the server",
        validation_alias=AliasChoices("HOST", "SERVER_HOST"),
    )
    port: int = Field(
        default=3000,
        description="Port to bind the server",
        validation_alias=AliasChoices("PORT", "SERVER_PORT"),
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload for development",
        validation_alias=AliasChoices("SERVER_RELOAD"),
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore", frozen=True
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore", frozen=True
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    upstreams: UpstreamSettings = Field(default_factory=UpstreamSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
