from .base import EngineDocument, RenderingEngine
from .pymupdf import PyMuPDFDocument, PyMuPDFEngine

__all__ = [
    "EngineDocument",
    "RenderingEngine",
    "PyMuPDFDocument",
    "PyMuPDFEngine",
]
