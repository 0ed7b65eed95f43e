"""
Cover letter generation from a résumé PDF or from free-text background.
"""
import logging
from typing import Optional

from fastapi import UploadFile

from resume_ace.core.config import Settings
from resume_ace.core.errors import ValidationError
from resume_ace.schemas.cover_letter import CoverLetterResponse
from resume_ace.services.generation import GenerationClient, GenerationRequest
from resume_ace.services.normalizer import normalize_cover_letter_response
from resume_ace.services.prompts import TaskKind, build_prompt
from resume_ace.services.resume_parser import extract_text_from_pdf, require_text
from resume_ace.services.upload_service import stored_upload, validate_upload

logger = logging.getLogger(__name__)

TEXT_FIELDS_REQUIRED = "Both job description and skills/experience are required"


async def generate_cover_letter_from_resume(
    upload: Optional[UploadFile],
    job_description: Optional[str],
    settings: Settings,
    client: GenerationClient,
) -> CoverLetterResponse:
    # Both inputs are checked before the upload touches the disk
    validate_upload(upload, settings, missing_message="No resume file uploaded")
    if not job_description or not job_description.strip():
        raise ValidationError("No job description provided")

    async with stored_upload(upload, settings, missing_message="No resume file uploaded") as uploaded:
        resume_text = require_text(
            await extract_text_from_pdf(uploaded.storage_path),
            "Could not extract text from resume PDF",
        )

        prompt = build_prompt(
            TaskKind.COVER_LETTER_RESUME,
            resume_text=resume_text,
            job_description=job_description,
        )
        raw = await client.generate(GenerationRequest(TaskKind.COVER_LETTER_RESUME, prompt))

        return normalize_cover_letter_response(raw, source="resume")


async def generate_cover_letter_from_text(
    job_description: Optional[str],
    skills_experience: Optional[str],
    client: GenerationClient,
) -> CoverLetterResponse:
    if not job_description or not skills_experience:
        raise ValidationError(TEXT_FIELDS_REQUIRED)

    prompt = build_prompt(
        TaskKind.COVER_LETTER_TEXT,
        job_description=job_description,
        skills_experience=skills_experience,
    )
    raw = await client.generate(GenerationRequest(TaskKind.COVER_LETTER_TEXT, prompt))

    return normalize_cover_letter_response(raw, source="text")
