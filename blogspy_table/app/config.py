from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogspy_table.app.errors import config_error_from_validation

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class TableSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BLOGSPY_TABLE_", extra="ignore")

    DEFAULT_PAGE_SIZE: int = Field(default=10, ge=1)
    SEARCH_PLACEHOLDER: str = "Search..."
    EMPTY_MESSAGE: str = "No data available"
    LOADING_MESSAGE: str = "Loading..."
    SEARCH_DEBOUNCE_MS: int = Field(default=0, ge=0)
    EXPORT_DIR: str = "./exports"
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"expected one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


def load_settings(env_file: str | None = None) -> TableSettings:
    """Load settings from the environment with an optional .env override."""
    try:
        if env_file is None:
            return TableSettings()
        return TableSettings(_env_file=env_file)
    except ValidationError as exc:
        raise config_error_from_validation(exc, source="table settings") from exc
