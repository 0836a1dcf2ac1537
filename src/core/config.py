"""Application configuration using pydantic-settings."""
from functools import lru_cache

from fastapi import Request
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Static bearer token every /bookmarks request must present
    api_token: str = Field(validation_alias="API_TOKEN")

    # "production" switches to terse request logs and generic 500 bodies
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    # Load the sample bookmarks into the store at startup
    seed_bookmarks: bool = Field(default=False, validation_alias="SEED_BOOKMARKS")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")  # noqa: S104
    port: int = Field(default=8000, validation_alias="PORT")

    @field_validator("api_token")
    @classmethod
    def validate_api_token(cls, v: str) -> str:
        """Reject a blank token, which would otherwise match an empty bearer credential."""
        if not v.strip():
            raise ValueError("API_TOKEN must not be empty")
        return v

    @property
    def is_production(self) -> bool:
        """Whether the service runs in production mode."""
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_request_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings
