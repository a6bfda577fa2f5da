"""Configuration management for the Lantern career engine.

Settings are loaded once from the environment (and an optional ``.env``
file) with pydantic-settings. Provider selection is derived from these values
a single time at startup; no component reads environment flags directly.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lantern.utils.logger import setup_logging


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="Lantern", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_ENV: str = Field(default="development", description="Application environment")
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    # AI provider
    USE_REAL_AI: bool = Field(
        default=False, description="Call an external generative model for augmentation"
    )
    LLM_PROVIDER: str = Field(
        default="openai", description="Generative provider: openai or gemini"
    )
    OPENAI_API_KEY: Optional[str] = Field(default=None, description="OpenAI API key")
    OPENAI_MODEL: str = Field(default="gpt-3.5-turbo", description="OpenAI model name")
    OPENAI_TEMPERATURE: float = Field(
        default=0.3, description="OpenAI sampling temperature", ge=0, le=2
    )
    OPENAI_MAX_TOKENS: int = Field(
        default=2000, description="OpenAI completion token limit", ge=1
    )
    OPENAI_BASE_URL: str = Field(
        default="https://api.openai.com/v1", description="OpenAI API base URL"
    )
    GOOGLE_API_KEY: Optional[str] = Field(default=None, description="Google Gemini API key")
    GOOGLE_MODEL: str = Field(default="gemini-1.5-flash", description="Gemini model name")
    GOOGLE_TEMPERATURE: float = Field(
        default=0.3, description="Gemini sampling temperature", ge=0, le=2
    )
    GOOGLE_MAX_TOKENS: int = Field(
        default=2000, description="Gemini output token limit", ge=1
    )
    GOOGLE_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini API base URL",
    )
    AI_REQUEST_TIMEOUT: float = Field(
        default=10.0, description="Timeout for one augmentation call in seconds", gt=0
    )
    JSON_REPAIR_MAX_ATTEMPTS: int = Field(
        default=5, description="Maximum parse attempts when repairing model output", ge=1
    )
    MAX_AI_AUGMENTED_CAREERS: int = Field(
        default=3, description="Top matches that receive an AI augmentation call", ge=0
    )

    # Job market provider (Adzuna)
    USE_REAL_JOBS: bool = Field(default=False, description="Query live job listings")
    ADZUNA_APP_ID: Optional[str] = Field(default=None, description="Adzuna application id")
    ADZUNA_API_KEY: Optional[str] = Field(default=None, description="Adzuna application key")
    ADZUNA_COUNTRY: str = Field(default="us", description="Adzuna country code")
    ADZUNA_BASE_URL: str = Field(
        default="https://api.adzuna.com/v1/api/jobs", description="Adzuna jobs API base URL"
    )
    JOB_SEARCH_TIMEOUT: float = Field(
        default=10.0, description="Timeout for one job search in seconds", gt=0
    )
    JOB_SEARCH_RADIUS_MILES: int = Field(
        default=25, description="Default job search radius", ge=1, le=100
    )
    RELOCATION_RADIUS_MILES: int = Field(
        default=100, description="Search radius for students open to relocating", ge=1, le=100
    )
    JOB_RESULTS_PER_PAGE: int = Field(
        default=20, description="Listings requested per search", ge=1, le=50
    )

    @field_validator("APP_ENV")
    def validate_app_env(cls, v: str) -> str:
        """Validate application environment."""
        valid_envs = ["development", "test", "staging", "production"]
        if v not in valid_envs:
            raise ValueError(f"APP_ENV must be one of {valid_envs}")
        return v

    @field_validator("LLM_PROVIDER")
    def validate_llm_provider(cls, v: str) -> str:
        """Normalize provider names; ``google`` is accepted for Gemini."""
        normalized = v.strip().lower()
        if normalized == "google":
            normalized = "gemini"
        if normalized not in ("openai", "gemini"):
            raise ValueError("LLM_PROVIDER must be 'openai' or 'gemini'")
        return normalized

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings after all fields are set."""
        if self.is_production() and self.LOG_LEVEL == "DEBUG":
            self.LOG_LEVEL = "INFO"
        return self

    def get_llm_config(self, provider: Optional[str] = None) -> Dict[str, Any]:
        """Get constructor arguments for a generative provider."""
        provider = provider or self.LLM_PROVIDER

        if provider == "openai":
            return {
                "api_key": self.OPENAI_API_KEY,
                "model": self.OPENAI_MODEL,
                "max_tokens": self.OPENAI_MAX_TOKENS,
                "temperature": self.OPENAI_TEMPERATURE,
                "timeout": self.AI_REQUEST_TIMEOUT,
                "base_url": self.OPENAI_BASE_URL,
            }
        elif provider == "gemini":
            return {
                "api_key": self.GOOGLE_API_KEY,
                "model": self.GOOGLE_MODEL,
                "max_tokens": self.GOOGLE_MAX_TOKENS,
                "temperature": self.GOOGLE_TEMPERATURE,
                "timeout": self.AI_REQUEST_TIMEOUT,
                "base_url": self.GOOGLE_BASE_URL,
            }
        else:
            return {}

    def ai_enabled(self) -> bool:
        """Check whether AI augmentation is switched on and has credentials."""
        return bool(self.USE_REAL_AI and self.get_llm_config().get("api_key"))

    def jobs_enabled(self) -> bool:
        """Check whether live job data is switched on and has credentials."""
        return bool(self.USE_REAL_JOBS and self.ADZUNA_APP_ID and self.ADZUNA_API_KEY)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    settings = Settings()
    setup_logging(environment=settings.APP_ENV, log_level=settings.LOG_LEVEL)
    return settings


__all__ = ["Settings", "get_settings"]
