"""Pydantic model for user settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .values import CANVAS_DEFAULTS, EXPORT_DEFAULTS, LOG_LEVELS, LOGGING_DEFAULTS


class Settings(BaseModel):
    """User settings persisted to disk.

    Parameters
    ----------
    default_width, default_height: Canvas size used by batch mode when
        neither the command line nor the scene file gives one.
    output_dir: Directory exported ``.ppm`` files are written to.
    log_level: Root logging level name.
    """

    default_width: int = Field(default=CANVAS_DEFAULTS["width"])
    default_height: int = Field(default=CANVAS_DEFAULTS["height"])
    output_dir: str = Field(default=EXPORT_DEFAULTS["output_dir"])
    log_level: str = Field(default=LOGGING_DEFAULTS["level"])

    @field_validator("default_width", "default_height")
    @classmethod
    def _chk_dim(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be > 0")
        return v

    @field_validator("output_dir")
    @classmethod
    def _chk_dir(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("output_dir must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def _chk_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError("invalid log level: must be one of " + ", ".join(LOG_LEVELS))
        return v
