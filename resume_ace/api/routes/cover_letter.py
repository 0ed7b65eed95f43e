"""
Cover letter endpoints.

The PDF route reports failures with the shared {error, details} body; the
text route keeps its own {success, data | error} envelope.
"""
import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_ace.api.deps import get_generation_client, get_settings
from resume_ace.core.config import Settings
from resume_ace.core.errors import GenerationError, ValidationError, error_payload
from resume_ace.schemas.cover_letter import (
    CoverLetterResponse,
    CoverLetterTextRequest,
    CoverLetterTextResponse,
)
from resume_ace.services.cover_letter_service import (
    generate_cover_letter_from_resume,
    generate_cover_letter_from_text,
)
from resume_ace.services.generation import GenerationClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generate-cover-letter", tags=["Cover Letter"])


@router.post("", response_model=CoverLetterResponse, response_model_exclude_none=True)
async def generate_from_resume(
    resume: Optional[UploadFile] = File(None),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    settings: Settings = Depends(get_settings),
    client: GenerationClient = Depends(get_generation_client),
):
    return await generate_cover_letter_from_resume(resume, job_description, settings, client)


async def read_text_request(request: Request) -> CoverLetterTextRequest:
    """
    Read jobDescription/skillsExperience from a JSON or form-encoded body.

    Malformed bodies and non-string values count as missing fields, so the
    caller reports them with the usual required-fields message.
    """
    content_type = request.headers.get("content-type", "")
    data: Any = {}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        try:
            data = await request.form()
        except StarletteHTTPException as e:
            logger.warning(f"Text cover letter form body could not be parsed: {e.detail}")
    else:
        raw = await request.body()
        if raw.strip():
            try:
                data = json.loads(raw)
            except (ValueError, RecursionError):
                logger.warning("Text cover letter request body is not valid JSON")

    if not isinstance(data, Mapping):
        data = {}

    def text_field(name: str) -> Optional[str]:
        value = data.get(name)
        return value if isinstance(value, str) else None

    return CoverLetterTextRequest(
        job_description=text_field("jobDescription"),
        skills_experience=text_field("skillsExperience"),
    )


@router.post(
    "/text",
    response_model=CoverLetterTextResponse,
    response_model_exclude_none=True,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CoverLetterTextRequest.model_json_schema(by_alias=True)},
                "application/x-www-form-urlencoded": {"schema": CoverLetterTextRequest.model_json_schema(by_alias=True)},
            },
        }
    },
)
async def generate_from_text(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: GenerationClient = Depends(get_generation_client),
):
    try:
        body = await read_text_request(request)
        logger.info(
            f"Text cover letter request: jobDescription={len(body.job_description or '')} chars, "
            f"skillsExperience={len(body.skills_experience or '')} chars"
        )
        letter = await generate_cover_letter_from_text(
            body.job_description, body.skills_experience, client
        )
    except ValidationError as e:
        return JSONResponse(status_code=e.status_code, content=error_payload(e.message, envelope=True))
    except GenerationError as e:
        logger.error(f"Error generating cover letter: {e.message}", exc_info=True)
        details = e.message if settings.is_development else None
        return JSONResponse(
            status_code=e.status_code,
            content=error_payload("Failed to generate cover letter", details, envelope=True),
        )
    except Exception as e:
        logger.error(f"Unexpected error generating cover letter: {e}", exc_info=True)
        details = str(e) if settings.is_development else None
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload("Failed to generate cover letter", details, envelope=True),
        )

    return CoverLetterTextResponse(data=letter)
