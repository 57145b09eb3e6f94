from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


FormatChoice = Literal["png", "jpeg", "jpg"]
LogFormatChoice = Literal["text", "json"]


class Settings(BaseSettings):
    """Environment-driven defaults for the command-line tool.

    Values are read from environment variables with prefix ``PDF2IMG_`` and
    optionally from a local ``.env`` file. Explicit command-line flags always
    take precedence over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="PDF2IMG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Conversion defaults ---
    default_format: FormatChoice = Field(
        "png",
        description="Output image format when --format is not given.",
    )
    default_quality: int = Field(
        85,
        description="JPEG quality when --quality is not given.",
    )
    default_dpi: int = Field(
        150,
        description="Render resolution when --dpi is not given.",
    )
    default_pages: str = Field(
        "all",
        description="Page expression when --pages is not given.",
    )

    # --- Logging ---
    log_level: str = Field(
        "WARNING",
        description="Minimum level for diagnostic logs on stderr.",
    )
    log_format: LogFormatChoice = Field(
        "text",
        description="Renderer for diagnostic logs.",
    )

    # --- Engine ---
    engine_acquire_timeout: float = Field(
        30.0,
        description="Seconds to wait for a rendering engine instance.",
    )

    @field_validator("default_format", mode="before")
    @classmethod
    def lower_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value: object) -> str:
        if value is None:
            return "WARNING"
        return str(value).upper()


# Global singleton used by the CLI.
settings = Settings()


__all__ = [
    "Settings",
    "settings",
    "FormatChoice",
    "LogFormatChoice",
]
