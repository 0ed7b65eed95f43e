"""
Liveness endpoints for deployment monitoring.
"""
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from resume_ace import __version__
from resume_ace.api.deps import get_settings
from resume_ace.core.config import Settings

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    return "ATS Check API is running"


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint for deployment monitoring.

    Does not call the LLM provider; it only reports how the service is configured.
    """
    return {
        "status": "ok",
        "service": "Resume Ace API",
        "variant": settings.variant,
        "provider": settings.llm_provider,
        "timestamp": datetime.utcnow().isoformat(),
        "version": __version__,
    }
