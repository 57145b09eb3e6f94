from __future__ import annotations

from ..exceptions import InvalidArgumentsError
from .formats import ImageFormat, validate_format
from .page_range import validate_page_range

MIN_QUALITY = 1
MAX_QUALITY = 100
MIN_DPI = 72
MAX_DPI = 600


def validate_quality(quality: int) -> int:
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidArgumentsError(
            f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}"
        )
    return quality


def validate_dpi(dpi: int) -> int:
    if not MIN_DPI <= dpi <= MAX_DPI:
        raise InvalidArgumentsError(f"DPI must be between {MIN_DPI} and {MAX_DPI}")
    return dpi


def validate_options(fmt: str, quality: int, dpi: int, pages: str) -> ImageFormat:
    """Run the cheap checks in order: format, quality, DPI, range syntax."""
    image_format = validate_format(fmt)
    validate_quality(quality)
    validate_dpi(dpi)
    validate_page_range(pages)
    return image_format


__all__ = [
    "MIN_QUALITY",
    "MAX_QUALITY",
    "MIN_DPI",
    "MAX_DPI",
    "validate_quality",
    "validate_dpi",
    "validate_options",
]
