"""Service configuration settings."""

import logging
from typing import List, Literal, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pipeline_poc.core.clock import resolve_zone

ServiceVariant = Literal["pipeline-poc", "e2e-test"]

DEFAULT_SERVICE_NAMES = {
    "pipeline-poc": "cicd-pipeline-poc-app",
    "e2e-test": "opal-e2e-test-app",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    service_variant: ServiceVariant = "pipeline-poc"
    service_name: Optional[str] = None
    service_version: str = "1.0.0"
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8080

    # Clock zone (IANA id); host local zone when unset
    timezone: Optional[str] = None

    # CORS configuration
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    # Credentials are injected at process start, never hardcoded
    admin_password: Optional[SecretStr] = None
    api_key: Optional[SecretStr] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        try:
            resolve_zone(value)
        except (LookupError, ValueError) as e:
            raise ValueError(f"unknown time zone: {value}") from e
        return value.strip()

    @field_validator("port")
    @classmethod
    def _validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return value

    @property
    def resolved_service_name(self) -> str:
        """Service name override, or the variant's default name."""
        if self.service_name and self.service_name.strip():
            return self.service_name.strip()
        return DEFAULT_SERVICE_NAMES[self.service_variant]

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def credentials_configured(self) -> bool:
        """Whether both injected credentials are present."""
        return self.admin_password is not None and self.api_key is not None


# Global settings instance
settings = Settings()
