"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from resumeguard.models.validation import DEFAULT_MAX_SIZE, ValidationOptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Resume Guard"
    debug: bool = False

    # Upload validation
    max_upload_size_bytes: int = DEFAULT_MAX_SIZE
    strict_validation: bool = True

    # Text extraction
    extraction_timeout_seconds: float = 10.0

    # Rate limiting (per client IP on upload endpoints)
    rate_limit_enabled: bool = True
    upload_rate_limit: str = "10/hour"

    # API
    api_prefix: str = "/api"
    # CORS_ORIGINS_STR env var should be comma-separated list of allowed origins
    # e.g., "http://localhost:5173,https://example.com"
    cors_origins_str: str = "http://localhost:5173"

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    def validation_options(self) -> ValidationOptions:
        """Build the validator options from the configured upload policy."""
        return ValidationOptions(
            max_size=self.max_upload_size_bytes,
            strict_validation=self.strict_validation,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
