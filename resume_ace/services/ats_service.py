"""
ATS compatibility check: uploaded PDF in, score/findings/suggestions out.
"""
import logging
from typing import Optional

from fastapi import UploadFile

from resume_ace.core.config import Settings
from resume_ace.schemas.ats import AtsCheckResponse
from resume_ace.services.generation import GenerationClient, GenerationRequest
from resume_ace.services.normalizer import normalize_ats_response
from resume_ace.services.prompts import TaskKind, build_prompt
from resume_ace.services.resume_parser import extract_text_from_pdf, require_text
from resume_ace.services.upload_service import stored_upload

logger = logging.getLogger(__name__)


async def run_ats_check(
    upload: Optional[UploadFile],
    settings: Settings,
    client: GenerationClient,
) -> AtsCheckResponse:
    async with stored_upload(upload, settings) as uploaded:
        logger.info(f"Processing file: {uploaded.storage_path}")
        pdf_text = require_text(await extract_text_from_pdf(uploaded.storage_path))

        prompt = build_prompt(TaskKind.ATS_SCORE, resume_text=pdf_text)
        raw = await client.generate(GenerationRequest(TaskKind.ATS_SCORE, prompt))

        return normalize_ats_response(raw)
