import fitz
import pytest
import structlog
from PIL import Image

from pdf2img.engine import EngineDocument, RenderingEngine
from pdf2img.exceptions import InvalidPDFError, RenderError


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_pdf(tmp_path):
    """Build a small PDF with numbered pages and return its path."""

    def _make(page_count=3, name="doc.pdf", size=(144, 144)):
        doc = fitz.open()
        for index in range(page_count):
            page = doc.new_page(width=size[0], height=size[1])
            page.insert_text((20, 40), f"Page {index + 1}")
        path = tmp_path / name
        doc.save(str(path))
        doc.close()
        return path

    return _make


class FakeDocument(EngineDocument):
    def __init__(self, total_pages, fail_on_page=None):
        self.total_pages = total_pages
        self.fail_on_page = fail_on_page
        self.rendered = []
        self.close_calls = 0

    @property
    def page_count(self):
        return self.total_pages

    def render_page(self, index, dpi):
        if index + 1 == self.fail_on_page:
            raise RenderError(f"failed to render page {index + 1}: boom", page_number=index + 1)
        self.rendered.append((index, dpi))
        return Image.new("RGB", (8, 8), "white")

    def close(self):
        self.close_calls += 1


class FakeEngine(RenderingEngine):
    """In-memory engine: any bytes starting with %PDF open as a document."""

    def __init__(self, total_pages=3, fail_on_page=None):
        self.document = FakeDocument(total_pages, fail_on_page)
        self.opened = 0
        self.close_calls = 0

    def open_document(self, data):
        if not data.startswith(b"%PDF"):
            raise InvalidPDFError("failed to open PDF: not a PDF")
        self.opened += 1
        return self.document

    def close(self):
        self.close_calls += 1


@pytest.fixture
def fake_pdf(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.7 fake")
    return path


@pytest.fixture
def fake_engine():
    return FakeEngine


@pytest.fixture
def pageless_pdf(tmp_path):
    """A well-formed PDF whose page tree is empty."""
    path = tmp_path / "blank.pdf"
    path.write_bytes(
        b"%PDF-1.4\n"
        b"1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n"
        b"2 0 obj\n<< /Type /Pages /Kids [] /Count 0 >>\nendobj\n"
        b"trailer\n<< /Root 1 0 R >>\n"
        b"%%EOF\n"
    )
    return path
