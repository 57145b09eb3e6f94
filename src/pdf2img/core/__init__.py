"""Page selection, validation and conversion orchestration."""

from .converter import Converter
from .formats import ImageFormat, output_filename, validate_format
from .models import ConversionConfig, ConversionResult
from .page_range import format_page_selection, parse_page_range, validate_page_range
from .validation import validate_dpi, validate_options, validate_quality

__all__ = [
    "Converter",
    "ImageFormat",
    "output_filename",
    "validate_format",
    "ConversionConfig",
    "ConversionResult",
    "format_page_selection",
    "parse_page_range",
    "validate_page_range",
    "validate_dpi",
    "validate_options",
    "validate_quality",
]
