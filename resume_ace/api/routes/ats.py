from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from resume_ace.api.deps import get_generation_client, get_settings
from resume_ace.core.config import Settings
from resume_ace.schemas.ats import AtsCheckResponse
from resume_ace.services.ats_service import run_ats_check
from resume_ace.services.generation import GenerationClient

router = APIRouter(prefix="/api", tags=["ATS"])


@router.post("/ats-check", response_model=AtsCheckResponse)
async def ats_check(
    resume: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    client: GenerationClient = Depends(get_generation_client),
):
    return await run_ats_check(resume, settings, client)
