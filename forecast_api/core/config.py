"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (interactive docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        request_id_header: Header carrying the request correlation id.
        trace_context_enabled: Read trace ids from OpenTelemetry when True.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Forecast API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    request_id_header: str = "X-Request-ID"
    trace_context_enabled: bool = True


settings = Settings()
