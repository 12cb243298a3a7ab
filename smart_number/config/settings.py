"""
Configuration Management for Smart Number

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Only presentation defaults live here.
Limits tables are part of the numeric contract and are not configurable,
so two deployments can never disagree on what "too large" means.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormatterSettings(BaseSettings):
    """Defaults applied when a caller omits currency/symbol/locale."""

    model_config = SettingsConfigDict(
        env_prefix="SMART_NUMBER_",
        extra="ignore"
    )

    default_currency: str = Field(
        default="MXN",
        min_length=3,
        max_length=3,
        description="ISO 4217 code used when none is given"
    )
    default_symbol: str = Field(
        default="$",
        description="Currency symbol used when none is given"
    )
    default_locale: str = Field(
        default="es-MX",
        description="Locale for grouping and decimal separators"
    )
    input_display_locale: str = Field(
        default="es-MX",
        description="Locale for the grouped display of a blurred input field"
    )

    @field_validator('default_currency')
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for structured logs"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (False for console output)"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def formatting(self) -> FormatterSettings:
        return FormatterSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.formatting
        results["formatting"] = True
    except Exception as e:
        results["formatting"] = False
        results["formatting_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
