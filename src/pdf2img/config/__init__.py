"""
Typed configuration package for pdf2img.

This package exposes ``Settings`` / ``settings``: environment-driven defaults
(pydantic-settings) for the command-line tool.
"""

from .settings import (
    Settings,
    settings,
    FormatChoice,
    LogFormatChoice,
)

__all__ = [
    "Settings",
    "settings",
    "FormatChoice",
    "LogFormatChoice",
]
