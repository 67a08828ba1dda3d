"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with DOTSPACE_ prefix
3. .env file (if DOTSPACE_ENV_FILE points at one)
4. Layered YAML config files:
   - Project config: .dotspace/config.yaml (highest)
   - User config: ~/.config/dotspace/config.yaml
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import dotspace.config.sources as sources

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_env_file() -> str | None:
    """Return DOTSPACE_ENV_FILE if it names an existing file."""
    if env_file := _os.environ.get("DOTSPACE_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    dotspace configuration settings.

    All settings can be overridden via environment variables with the
    DOTSPACE_ prefix, e.g. DOTSPACE_OUTPUT_FORMAT=json.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="DOTSPACE_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = _pydantic.Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    output_format: _typing.Literal["yaml", "json"] = _pydantic.Field(
        default="yaml",
        description="Format used to print documents and values",
    )
    indent: int = _pydantic.Field(default=2, ge=0, le=8)
    sort_keys: bool = False
    color: bool | None = _pydantic.Field(
        default=None,
        description="Syntax highlighting; None detects a terminal",
    )

    @_pydantic.field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: _typing.Any) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) (highest)
        2. env_settings (DOTSPACE_* env vars)
        3. dotenv_settings (.env file)
        4. YAML config layers
        5. (defaults via Field definitions) (lowest)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.YamlLayersSettingsSource(settings_cls),
            file_secret_settings,
        )
