from fastapi import Request

from resume_ace.core.config import Settings
from resume_ace.services.generation import GenerationClient


def get_settings(request: Request) -> Settings:
    """Settings the app was built with."""
    return request.app.state.settings


def get_generation_client(request: Request) -> GenerationClient:
    """Generation client over the app's provider, one per request."""
    return GenerationClient(request.app.state.provider, request.app.state.settings)
