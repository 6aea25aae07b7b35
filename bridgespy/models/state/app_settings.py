"""Application settings models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bridgespy.constants.defaults import (
    FILTER_MODE_DEFAULT,
    FOLLOW_DEFAULT,
    RETENTION_WINDOW_SECONDS_DEFAULT,
    SAMPLE_INTERVAL_SECONDS_DEFAULT,
    SAMPLE_WINDOW_SECONDS_DEFAULT,
    SOURCE_POLL_INTERVAL_SECONDS_DEFAULT,
    START_AT_END_DEFAULT,
)
from bridgespy.constants.enums import FilterMode
from bridgespy.constants.limits import (
    MAX_ROWS_DISPLAY,
    RETENTION_WINDOW_SECONDS_MAX,
    RETENTION_WINDOW_SECONDS_MIN,
    SAMPLE_INTERVAL_SECONDS_MIN,
    SAMPLE_WINDOW_SECONDS_MIN,
    SOURCE_POLL_INTERVAL_SECONDS_MIN,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Source
    source_path: str = ""
    follow: bool = FOLLOW_DEFAULT
    start_at_end: bool = START_AT_END_DEFAULT
    source_poll_interval_seconds: float = Field(
        SOURCE_POLL_INTERVAL_SECONDS_DEFAULT, ge=SOURCE_POLL_INTERVAL_SECONDS_MIN
    )

    # Windows
    retention_window_seconds: int = Field(
        RETENTION_WINDOW_SECONDS_DEFAULT,
        ge=RETENTION_WINDOW_SECONDS_MIN,
        le=RETENTION_WINDOW_SECONDS_MAX,
    )
    sample_window_seconds: int = Field(
        SAMPLE_WINDOW_SECONDS_DEFAULT, ge=SAMPLE_WINDOW_SECONDS_MIN
    )
    sample_interval_seconds: float = Field(
        SAMPLE_INTERVAL_SECONDS_DEFAULT, ge=SAMPLE_INTERVAL_SECONDS_MIN
    )

    # Table
    filter_mode: FilterMode = FilterMode(FILTER_MODE_DEFAULT)
    max_rows_display: int = Field(MAX_ROWS_DISPLAY, ge=1)

    @field_validator("filter_mode", mode="before")
    @classmethod
    def _normalize_filter_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _sample_window_within_retention(self) -> AppSettings:
        if self.sample_window_seconds > self.retention_window_seconds:
            raise ValueError(
                "sample_window_seconds must not exceed retention_window_seconds"
            )
        return self

    @property
    def retention_window_ms(self) -> int:
        return self.retention_window_seconds * 1000

    @property
    def sample_window_ms(self) -> int:
        return self.sample_window_seconds * 1000


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
