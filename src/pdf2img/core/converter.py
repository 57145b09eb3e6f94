"""
Conversion orchestrator.

``Converter`` owns one rendering engine handle and drives a single
conversion: read bytes, open the document, resolve pages, then render and
write each page in ascending order. Failures are reported through the
returned ``ConversionResult`` rather than raised.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from structlog.typing import BindableLogger

from ..engine import PyMuPDFEngine, RenderingEngine
from ..exceptions import (
    EngineInitError,
    ExitCode,
    InputNotFoundError,
    OutputDirError,
    Pdf2ImgError,
    WriteError,
)
from ..utils.logging_config import get_logger
from .codec import save_image
from .formats import output_filename
from .models import ConversionConfig, ConversionResult
from .page_range import parse_page_range

logger = get_logger(__name__)


def resolve_output_dir(config: ConversionConfig) -> Path:
    """Return the directory to write into, creating an explicit one if needed."""
    if config.output_dir is None:
        return config.input_file.parent
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirError(f"failed to create output directory: {exc}") from exc
    return config.output_dir


def resolve_prefix(config: ConversionConfig) -> str:
    return config.prefix or config.input_file.stem


class Converter:
    """Drives one PDF-to-image conversion with an exclusively owned engine."""

    def __init__(self, engine: RenderingEngine) -> None:
        self._engine: Optional[RenderingEngine] = engine

    @classmethod
    def create(cls, acquire_timeout: float = 30.0) -> "Converter":
        """Acquire the PyMuPDF engine; raises ``EngineInitError`` on failure."""
        return cls(PyMuPDFEngine.acquire(timeout=acquire_timeout))

    def close(self) -> None:
        if self._engine is not None:
            engine, self._engine = self._engine, None
            engine.close()

    def __enter__(self) -> "Converter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def convert(self, config: ConversionConfig) -> ConversionResult:
        """Run the conversion and return a populated result."""
        written: List[str] = []
        log = logger.bind(input_file=str(config.input_file))
        try:
            self._run(config, written, log)
        except Pdf2ImgError as exc:
            log.info("conversion_failed", error=str(exc), exit_code=int(exc.exit_code))
            return ConversionResult(
                input_file=str(config.input_file),
                output_files=tuple(written),
                page_count=len(written),
                success=False,
                error=str(exc),
                exit_code=exc.exit_code,
            )

        log.info("conversion_finished", page_count=len(written))
        return ConversionResult(
            input_file=str(config.input_file),
            output_files=tuple(written),
            page_count=len(written),
            success=True,
            exit_code=ExitCode.SUCCESS,
        )

    def _run(self, config: ConversionConfig, written: List[str], log: BindableLogger) -> None:
        if self._engine is None:
            raise EngineInitError("converter has been closed")

        try:
            data = config.input_file.read_bytes()
        except OSError as exc:
            raise InputNotFoundError(f"failed to read PDF file: {exc}") from exc

        with self._engine.open_document(data) as document:
            total_pages = document.page_count
            pages = parse_page_range(config.pages, total_pages)
            log.info("pages_resolved", total_pages=total_pages, selected=len(pages))

            output_dir = resolve_output_dir(config)
            prefix = resolve_prefix(config)

            for page_number in pages:
                image = document.render_page(page_number - 1, config.dpi)
                target = output_dir / output_filename(prefix, page_number, config.format)
                try:
                    save_image(image, target, config.format, config.quality)
                except WriteError as exc:
                    raise WriteError(
                        f"failed to save page {page_number}: {exc}", page_number=page_number
                    ) from exc
                finally:
                    image.close()
                written.append(str(target))
                log.debug("page_written", page=page_number, path=str(target))


__all__ = ["Converter", "resolve_output_dir", "resolve_prefix"]
