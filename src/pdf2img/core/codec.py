from __future__ import annotations

from pathlib import Path

from PIL import Image

from ..exceptions import WriteError
from .formats import ImageFormat


def save_image(image: Image.Image, path: Path, fmt: ImageFormat, quality: int = 85) -> Path:
    """Encode ``image`` as ``fmt`` and write it to ``path``.

    ``quality`` only applies to JPEG. Raises ``WriteError`` on encoder or
    filesystem failure.
    """
    try:
        if fmt is ImageFormat.JPEG:
            if image.mode not in ("RGB", "L"):
                image = image.convert("RGB")
            image.save(path, format=fmt.pillow_format, quality=quality)
        else:
            image.save(path, format=fmt.pillow_format)
    except (OSError, ValueError) as exc:
        raise WriteError(f"failed to save {path}: {exc}") from exc
    return path


__all__ = ["save_image"]
