from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Process exit codes reported by the ``pdf2img`` command."""

    SUCCESS = 0
    INVALID_ARGS = 1
    INPUT_NOT_FOUND = 2
    INVALID_PDF = 3
    OUTPUT_DIR_ERROR = 4
    RENDER_FAILED = 5
    WRITE_FAILED = 6
    INIT_FAILED = 7


class Pdf2ImgError(Exception):
    """Base exception for all pdf2img errors."""

    exit_code: ExitCode = ExitCode.INVALID_ARGS


class InvalidArgumentsError(Pdf2ImgError, ValueError):
    """Raised when a flag value or the page expression is malformed."""

    exit_code = ExitCode.INVALID_ARGS


class InvalidFormatError(InvalidArgumentsError):
    """Raised when the requested output format is not png or jpeg."""

    def __init__(self, value: str):
        super().__init__(f"invalid format: {value} (must be png or jpeg)")
        self.value = value


class PageRangeError(InvalidArgumentsError):
    """Raised when a page expression is malformed or out of bounds."""

    def __init__(self, message: str, clause: str = ""):
        super().__init__(message)
        self.clause = clause


class InputNotFoundError(Pdf2ImgError):
    """Raised when the input file cannot be read."""

    exit_code = ExitCode.INPUT_NOT_FOUND


class InvalidPDFError(Pdf2ImgError):
    """Raised when the input bytes are not a usable PDF document."""

    exit_code = ExitCode.INVALID_PDF


class OutputDirError(Pdf2ImgError):
    """Raised when the output directory cannot be created."""

    exit_code = ExitCode.OUTPUT_DIR_ERROR


class RenderError(Pdf2ImgError):
    """Raised when the engine fails to rasterize a page."""

    exit_code = ExitCode.RENDER_FAILED

    def __init__(self, message: str, page_number: Optional[int] = None):
        super().__init__(message)
        self.page_number = page_number


class WriteError(Pdf2ImgError):
    """Raised when an image cannot be encoded or written to disk."""

    exit_code = ExitCode.WRITE_FAILED

    def __init__(self, message: str, page_number: Optional[int] = None):
        super().__init__(message)
        self.page_number = page_number


class EngineInitError(Pdf2ImgError):
    """Raised when the rendering engine cannot be acquired."""

    exit_code = ExitCode.INIT_FAILED
