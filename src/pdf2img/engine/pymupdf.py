from __future__ import annotations

import threading

from PIL import Image

try:
    import fitz  # type: ignore
except ImportError:
    fitz = None

from ..exceptions import EngineInitError, InvalidPDFError, RenderError
from ..utils.logging_config import get_logger
from .base import EngineDocument, RenderingEngine

LOGGER = get_logger(__name__)

# One engine instance per process, mirroring a pool with a single slot.
_INSTANCE_SLOTS = threading.BoundedSemaphore(1)


class PyMuPDFDocument(EngineDocument):
    def __init__(self, doc) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        if self._doc is None:
            raise InvalidPDFError("document is closed")
        try:
            return self._doc.page_count
        except Exception as exc:
            raise InvalidPDFError(f"failed to get page count: {exc}") from exc

    def render_page(self, index: int, dpi: int) -> Image.Image:
        if self._doc is None:
            raise RenderError("document is closed", page_number=index + 1)
        try:
            page = self._doc.load_page(index)
            pix = page.get_pixmap(dpi=dpi, alpha=False)
            return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
        except Exception as exc:
            raise RenderError(
                f"failed to render page {index + 1}: {exc}", page_number=index + 1
            ) from exc

    def close(self) -> None:
        if self._doc is not None:
            self._doc.close()
            self._doc = None


class PyMuPDFEngine(RenderingEngine):
    """Rendering engine backed by PyMuPDF (``fitz``)."""

    def __init__(self) -> None:
        self._held = False

    @classmethod
    def acquire(cls, timeout: float = 30.0) -> "PyMuPDFEngine":
        """Take the process-wide engine slot, waiting at most ``timeout`` seconds."""
        if fitz is None:
            raise EngineInitError("failed to initialize PyMuPDF: module not installed")
        if not _INSTANCE_SLOTS.acquire(timeout=timeout):
            raise EngineInitError(
                f"failed to get PyMuPDF instance: timed out after {timeout:g}s"
            )
        engine = cls()
        engine._held = True
        # MuPDF prints parse warnings to stderr by default.
        fitz.TOOLS.mupdf_display_errors(False)
        LOGGER.debug("engine_acquired", backend="pymupdf", version=fitz.VersionBind)
        return engine

    def open_document(self, data: bytes) -> PyMuPDFDocument:
        if not self._held:
            raise EngineInitError("engine has been released")
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as exc:
            raise InvalidPDFError(f"failed to open PDF: {exc}") from exc
        if doc.needs_pass:
            doc.close()
            raise InvalidPDFError("failed to open PDF: document is encrypted")
        return PyMuPDFDocument(doc)

    def close(self) -> None:
        if self._held:
            self._held = False
            _INSTANCE_SLOTS.release()
            LOGGER.debug("engine_released", backend="pymupdf")

