from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Schedule Timeline"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS - comma-separated list of allowed origins
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Default schedule shown before any edit
    default_document_path: str = "data/default-schedule.json"

    # Request limits
    max_request_size: int = 1024 * 1024  # 1MB, timeline documents are small
    request_timeout: float = 30.0  # seconds

    # OpenTelemetry Distributed Tracing
    telemetry_enabled: bool = False  # Enable/disable distributed tracing
    telemetry_exporter: str = "console"  # Options: "console", "otlp", "none"
    telemetry_otlp_endpoint: str | None = None  # e.g., "http://localhost:4317"
    telemetry_sample_rate: float = 1.0  # Sampling rate (0.0-1.0, 1.0 = 100%)
    telemetry_environment: str = "development"  # deployment environment tag

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate request limits and telemetry configuration"""
        if self.max_request_size <= 0:
            raise ValueError("MAX_REQUEST_SIZE must be a positive number of bytes.")
        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds.")

        if self.telemetry_exporter not in ("console", "otlp", "none"):
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                f"Must be one of: 'console', 'otlp', 'none'"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("TELEMETRY_SAMPLE_RATE must be between 0.0 and 1.0.")
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
