"""Convert PDF pages to PNG or JPEG images."""

__version__ = "0.1.0"

from .core import ConversionConfig, ConversionResult, Converter, ImageFormat

__all__ = [
    "__version__",
    "ConversionConfig",
    "ConversionResult",
    "Converter",
    "ImageFormat",
]
