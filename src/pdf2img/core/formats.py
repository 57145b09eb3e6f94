from __future__ import annotations

from enum import Enum

from ..exceptions import InvalidFormatError


class ImageFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"

    @property
    def extension(self) -> str:
        return "jpg" if self is ImageFormat.JPEG else "png"

    @property
    def pillow_format(self) -> str:
        return "JPEG" if self is ImageFormat.JPEG else "PNG"


_FORMAT_ALIASES = {
    "png": ImageFormat.PNG,
    "jpeg": ImageFormat.JPEG,
    "jpg": ImageFormat.JPEG,
}


def validate_format(name: str) -> ImageFormat:
    """Return the ``ImageFormat`` named by ``name`` (png, jpeg or jpg)."""
    fmt = _FORMAT_ALIASES.get(str(name).strip().lower())
    if fmt is None:
        raise InvalidFormatError(name)
    return fmt


def output_filename(prefix: str, page_number: int, fmt: ImageFormat) -> str:
    """Build ``{prefix}_page_{NNN}.{ext}``; page numbers widen past 999."""
    return f"{prefix}_page_{page_number:03d}.{fmt.extension}"


__all__ = ["ImageFormat", "validate_format", "output_filename"]
