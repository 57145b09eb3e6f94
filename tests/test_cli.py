import json
from pathlib import Path

import pytest

from pdf2img import __version__
from pdf2img.cli import main
from pdf2img.exceptions import ExitCode


def test_version_bypasses_everything(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"pdf2img version {__version__}"


def test_missing_input_argument_is_invalid_args(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == ExitCode.INVALID_ARGS
    assert "Error:" in capsys.readouterr().err


def test_non_integer_quality_is_invalid_args():
    with pytest.raises(SystemExit) as excinfo:
        main(["doc.pdf", "-q", "high"])
    assert excinfo.value.code == ExitCode.INVALID_ARGS


@pytest.mark.parametrize(
    "flags, message",
    [
        (["-f", "gif"], "invalid format: gif"),
        (["-q", "0"], "quality must be between 1 and 100"),
        (["-d", "700"], "DPI must be between 72 and 600"),
        (["-p", "1,,2"], "invalid page range format"),
    ],
)
def test_bad_options_fail_before_touching_files(tmp_path, capsys, flags, message):
    out_dir = tmp_path / "out"
    code = main([str(tmp_path / "missing.pdf"), "-o", str(out_dir), "--json", *flags])
    captured = capsys.readouterr()
    assert code == ExitCode.INVALID_ARGS
    assert message in captured.err
    assert captured.out == ""
    assert not out_dir.exists()


def test_human_summary(make_pdf, capsys):
    pdf = make_pdf(page_count=2)
    code = main([str(pdf), "-d", "72"])
    out = capsys.readouterr().out.splitlines()
    assert code == ExitCode.SUCCESS
    assert out[0] == "Converted 2 page(s) from doc.pdf"
    assert out[1] == f"  {pdf.parent / 'doc_page_001.png'}"
    assert out[2] == f"  {pdf.parent / 'doc_page_002.png'}"


def test_json_success(make_pdf, tmp_path, capsys):
    pdf = make_pdf(page_count=3)
    out_dir = tmp_path / "shots"
    code = main([str(pdf), "--json", "-f", "jpg", "-p", "3-2", "-o", str(out_dir), "--prefix", "x"])
    payload = json.loads(capsys.readouterr().out)
    assert code == ExitCode.SUCCESS
    assert payload["success"] is True
    assert payload["page_count"] == 2
    assert payload["error"] == ""
    assert payload["input_file"] == str(pdf)
    assert [Path(p).name for p in payload["output_files"]] == ["x_page_002.jpg", "x_page_003.jpg"]


def test_json_failure_for_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "gone.pdf"), "--json"])
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert code == ExitCode.INPUT_NOT_FOUND
    assert payload["success"] is False
    assert payload["output_files"] == []
    assert payload["error"]


def test_invalid_pdf_exit_code(tmp_path, capsys):
    pdf = tmp_path / "empty.pdf"
    pdf.write_bytes(b"")
    code = main([str(pdf)])
    assert code == ExitCode.INVALID_PDF
    assert capsys.readouterr().err.startswith("Error: ")
    assert list(tmp_path.glob("*.png")) == []


def test_page_out_of_bounds_exit_code(make_pdf, capsys):
    pdf = make_pdf(page_count=3)
    assert main([str(pdf), "-p", "1-5"]) == ExitCode.INVALID_ARGS
    assert "out of range (1-3)" in capsys.readouterr().err


def test_output_dir_error_exit_code(make_pdf, tmp_path):
    pdf = make_pdf(page_count=1)
    blocker = tmp_path / "file.txt"
    blocker.write_text("occupied")
    assert main([str(pdf), "-o", str(blocker)]) == ExitCode.OUTPUT_DIR_ERROR


def test_engine_init_failure(monkeypatch, make_pdf, capsys):
    from pdf2img.core import converter as converter_module
    from pdf2img.exceptions import EngineInitError

    def refuse(cls, timeout=30.0):
        raise EngineInitError("failed to get PyMuPDF instance: timed out after 0s")

    monkeypatch.setattr(converter_module.PyMuPDFEngine, "acquire", classmethod(refuse))
    code = main([str(make_pdf()), "--json"])
    captured = capsys.readouterr()
    assert code == ExitCode.INIT_FAILED
    assert captured.out == ""
    assert "failed to initialize converter" in captured.err


def test_pageless_pdf_is_invalid_args(pageless_pdf, capsys):
    assert main([str(pageless_pdf)]) == ExitCode.INVALID_ARGS
    assert "no valid pages specified" in capsys.readouterr().err
