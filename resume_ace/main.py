import logging
import os
import sys
from dataclasses import asdict
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_ace import __version__
from resume_ace.api.routes import ats, cover_letter, health
from resume_ace.core.config import Settings, get_settings
from resume_ace.core.errors import (
    ConfigError,
    ResumeAceError,
    resume_ace_error_handler,
    unhandled_error_handler,
)
from resume_ace.core.logging_config import mask_secret, sanitize_log_data, setup_logging
from resume_ace.llm.provider import LLMProvider
from resume_ace.llm.router import build_provider

logger = logging.getLogger(__name__)


# ============================================
# ✅ FASTAPI APP FACTORY
# ============================================

def create_app(settings: Optional[Settings] = None, provider: Optional[LLMProvider] = None) -> FastAPI:
    """
    Build the API for one deployment variant.

    Args:
        settings: Explicit configuration (loaded from the environment when None)
        provider: LLM provider (built from settings when None)

    Raises:
        ConfigError: Settings cannot be loaded, e.g. missing API key
    """
    settings = settings or get_settings()
    provider = provider or build_provider(settings)

    app = FastAPI(title="Resume Ace API", version=__version__)
    app.state.settings = settings
    app.state.provider = provider

    # ✅ CORS: one frontend origin per variant
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    app.add_exception_handler(ResumeAceError, resume_ace_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health.router)
    app.include_router(ats.router)
    app.include_router(cover_letter.router)

    return app


# ============================================
# ✅ ENTRY POINT
# ============================================

def main():
    load_dotenv()
    setup_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_DIR"))

    try:
        settings = get_settings()
        app = create_app(settings)
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Using API key starting with: {mask_secret(settings.api_key)}")
    logger.debug(f"Effective settings: {sanitize_log_data(asdict(settings))}")
    logger.info(f"Server running on port {settings.port} (variant={settings.variant}, origin={settings.cors_origin})")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
