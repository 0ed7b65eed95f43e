import logging

import fitz  # pymupdf
from starlette.concurrency import run_in_threadpool

from resume_ace.core.errors import ExtractionError

logger = logging.getLogger(__name__)


def parse_resume(file_path: str) -> str:
    text = ""
    with fitz.open(file_path) as doc:
        for page in doc:
            text += page.get_text()

    return text


async def extract_text_from_pdf(file_path: str) -> str:
    """Extract text off the event loop; any parser failure becomes ExtractionError."""
    try:
        return await run_in_threadpool(parse_resume, file_path)
    except Exception as e:
        logger.error(f"PDF extraction error for {file_path}: {e}", exc_info=True)
        raise ExtractionError("Failed to extract text from PDF") from e


def require_text(text: str, message: str = "Could not extract text from PDF") -> str:
    if not text or not text.strip():
        raise ExtractionError(message)
    return text
