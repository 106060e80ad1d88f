"""Configuration and settings management using pydantic-settings."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Node runtime settings with environment variable loading."""

    model_config = SettingsConfigDict(
        env_prefix="NODEPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Core settings
    env: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines (plain text when false)",
    )

    # HTTP settings
    http_timeout_s: float = Field(
        default=30.0,
        description="Timeout in seconds applied to every outbound request",
    )

    # ActiveCampaign settings
    activecampaign_page_size: int = Field(
        default=100,
        description="Page size used when fetching all items",
    )

    @field_validator("http_timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that the request timeout is positive."""
        if v <= 0:
            raise ValueError("http_timeout_s must be positive")
        return v

    @field_validator("activecampaign_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate that the page size is positive."""
        if v <= 0:
            raise ValueError("activecampaign_page_size must be positive")
        return v


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
