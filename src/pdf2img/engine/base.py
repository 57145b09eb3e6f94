from __future__ import annotations

from abc import ABC, abstractmethod

from PIL import Image


class EngineDocument(ABC):
    """An opened PDF document owned by a ``RenderingEngine``."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Total number of pages in the document."""

    @abstractmethod
    def render_page(self, index: int, dpi: int) -> Image.Image:
        """
        Rasterize one page.

        Args:
            index: 0-based page index.
            dpi: Render resolution in dots per inch.

        Returns:
            Image.Image: The page as an RGB raster buffer.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the document. Safe to call more than once."""

    def __enter__(self) -> "EngineDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class RenderingEngine(ABC):
    """Capability interface over the PDF rendering backend."""

    @abstractmethod
    def open_document(self, data: bytes) -> EngineDocument:
        """Open PDF bytes, raising ``InvalidPDFError`` if they are unusable."""

    @abstractmethod
    def close(self) -> None:
        """Release the engine instance. Safe to call more than once."""

    def __enter__(self) -> "RenderingEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
