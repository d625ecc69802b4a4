"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orange_pages.core.constants import (
    DEFAULT_INSECURE_SECRET,
    MIN_SECRET_KEY_LENGTH,
    SESSION_TOKEN_AUDIENCE,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Orange Pages"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # CORS
    cors_origins: list[str] = []

    # API Documentation
    api_docs_base_url: str = "https://api.orangepages.example"

    # Session tokens issued by the hosted auth provider
    session_secret: str = DEFAULT_INSECURE_SECRET
    session_algorithm: str = "HS256"
    session_audience: str = SESSION_TOKEN_AUDIENCE
    session_token_expire_minutes: int = 60

    # Observability
    log_level: str = "INFO"

    @field_validator("session_secret")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """Reject short secrets.

        The insecure default is allowed here and refused in production
        by ``is_production``.

        Raises:
            ValueError: If the secret is too short
        """
        if v != DEFAULT_INSECURE_SECRET and len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"SESSION_SECRET must be at least {MIN_SECRET_KEY_LENGTH} characters."
            )
        return v

    @field_validator("session_algorithm")
    @classmethod
    def validate_session_algorithm(cls, v: str) -> str:
        if v not in {"HS256"}:
            raise ValueError(f"Unsupported SESSION_ALGORITHM={v!r}. Allowed: HS256")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment.

        Raises:
            ValueError: If using the insecure session secret in production
        """
        is_prod = self.environment == "production"
        if is_prod and self.session_secret == DEFAULT_INSECURE_SECRET:
            raise ValueError(
                "SESSION_SECRET must be set to the auth provider's JWT secret in production."
            )
        return is_prod

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
