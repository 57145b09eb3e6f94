from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ExitCode
from .formats import ImageFormat, validate_format
from .page_range import validate_page_range
from .validation import validate_dpi, validate_quality


class ConversionConfig(BaseModel):
    """Validated, immutable options for one conversion."""

    model_config = ConfigDict(frozen=True)

    input_file: Path
    output_dir: Optional[Path] = None
    format: ImageFormat = ImageFormat.PNG
    quality: int = 85
    dpi: int = 150
    pages: str = "all"
    prefix: Optional[str] = None

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, value: object) -> ImageFormat:
        if isinstance(value, ImageFormat):
            return value
        return validate_format(str(value))

    @field_validator("quality")
    @classmethod
    def check_quality(cls, value: int) -> int:
        return validate_quality(value)

    @field_validator("dpi")
    @classmethod
    def check_dpi(cls, value: int) -> int:
        return validate_dpi(value)

    @field_validator("pages")
    @classmethod
    def check_pages(cls, value: str) -> str:
        validate_page_range(value)
        return value

    @field_validator("prefix")
    @classmethod
    def empty_prefix_is_default(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ConversionResult(BaseModel):
    """
    Outcome of one invocation, successful or not.

    ``exit_code`` is attached where the failure happened and is not part of
    the serialized document.
    """

    model_config = ConfigDict(frozen=True)

    input_file: str
    output_files: Tuple[str, ...] = Field(default_factory=tuple)
    page_count: int = 0
    success: bool = False
    error: str = ""
    exit_code: ExitCode = Field(default=ExitCode.SUCCESS, exclude=True)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


__all__ = ["ConversionConfig", "ConversionResult"]
