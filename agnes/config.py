"""Application settings loaded from environment variables."""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Agnes configuration. All values come from environment variables."""

    # Provider selection: auto, gemini, anthropic or null
    llm_provider: str = Field(default="auto")
    llm_timeout_s: float = Field(default=60.0)

    # Gemini
    gemini_api_key: str = Field(default="")
    gemini_model: str = Field(default="gemini-1.5-flash")
    gemini_api_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta"
    )

    # Anthropic
    anthropic_api_key: str = Field(default="")
    claude_model: str = Field(default="claude-sonnet-4-5-20250929")

    # Summaries
    summary_timezone: str = Field(default="UTC")
    daily_summary_cron: str = Field(default="0 7 * * *")
    weekly_summary_cron: str = Field(default="0 18 * * sun")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    def resolve_provider_name(self) -> str:
        """Return the concrete provider name, resolving ``auto`` from the API keys."""
        name = self.llm_provider.strip().lower() or "auto"
        if name != "auto":
            return name
        if self.gemini_api_key:
            return "gemini"
        if self.anthropic_api_key:
            return "anthropic"
        return "null"


settings = Settings()
