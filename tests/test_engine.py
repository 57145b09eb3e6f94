import pytest

from pdf2img.engine import PyMuPDFEngine
from pdf2img.exceptions import EngineInitError, InvalidPDFError, RenderError


@pytest.fixture
def engine():
    engine = PyMuPDFEngine.acquire(timeout=1)
    yield engine
    engine.close()


def test_render_page_size_follows_dpi(engine, make_pdf):
    path = make_pdf(page_count=2, size=(144, 72))
    with engine.open_document(path.read_bytes()) as document:
        assert document.page_count == 2
        image = document.render_page(0, 72)
        assert image.mode == "RGB"
        assert image.size == (144, 72)
        assert document.render_page(1, 144).size == (288, 144)


def test_render_missing_page_raises(engine, make_pdf):
    path = make_pdf(page_count=1)
    with engine.open_document(path.read_bytes()) as document:
        with pytest.raises(RenderError) as excinfo:
            document.render_page(5, 72)
    assert excinfo.value.page_number == 6


@pytest.mark.parametrize("data", [b"", b"hello, this is not a pdf"])
def test_open_invalid_bytes(engine, data):
    with pytest.raises(InvalidPDFError):
        engine.open_document(data)


def test_single_instance_per_process(engine):
    with pytest.raises(EngineInitError, match="timed out"):
        PyMuPDFEngine.acquire(timeout=0.01)


def test_release_is_idempotent_and_frees_slot():
    first = PyMuPDFEngine.acquire(timeout=1)
    first.close()
    first.close()
    second = PyMuPDFEngine.acquire(timeout=0.01)
    second.close()
    with pytest.raises(EngineInitError):
        first.open_document(b"%PDF")


def test_pageless_pdf_opens_with_zero_pages(engine, pageless_pdf):
    with engine.open_document(pageless_pdf.read_bytes()) as document:
        assert document.page_count == 0
