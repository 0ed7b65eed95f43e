import pytest

from conftest import make_pdf
from resume_ace.core.errors import ExtractionError
from resume_ace.services.resume_parser import extract_text_from_pdf, parse_resume, require_text


def test_parse_resume_reads_page_text(tmp_path):
    path = tmp_path / "resume.pdf"
    path.write_bytes(make_pdf("Jane Doe - Data Engineer"))

    assert "Jane Doe - Data Engineer" in parse_resume(str(path))


@pytest.mark.anyio
async def test_extract_wraps_parser_errors(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"")

    with pytest.raises(ExtractionError) as exc_info:
        await extract_text_from_pdf(str(path))

    assert exc_info.value.message == "Failed to extract text from PDF"
    assert exc_info.value.status_code == 422
    assert exc_info.value.__cause__ is not None


@pytest.mark.anyio
async def test_blank_pdf_yields_no_text(tmp_path):
    path = tmp_path / "blank.pdf"
    path.write_bytes(make_pdf())

    text = await extract_text_from_pdf(str(path))

    with pytest.raises(ExtractionError, match="Could not extract text from PDF"):
        require_text(text)


def test_require_text_passes_through():
    assert require_text("  hello ") == "  hello "
    with pytest.raises(ExtractionError, match="resume PDF"):
        require_text(" \n\t", "Could not extract text from resume PDF")
