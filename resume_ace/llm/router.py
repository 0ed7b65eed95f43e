"""
Provider construction and model selection per task.
"""
import logging
from typing import Dict

from resume_ace.core.config import Settings
from resume_ace.core.errors import ConfigError
from resume_ace.llm.provider import LLMProvider
from resume_ace.services.prompts import TaskKind

logger = logging.getLogger(__name__)

# Task -> sampling temperature
TASK_TEMPERATURES: Dict[TaskKind, float] = {
    TaskKind.ATS_SCORE: 0.2,
    TaskKind.COVER_LETTER_RESUME: 0.7,
    TaskKind.COVER_LETTER_TEXT: 0.7,
}


def get_model_for_task(task: TaskKind, settings: Settings) -> str:
    """All tasks share the configured model."""
    return settings.model


def get_temperature_for_task(task: TaskKind) -> float:
    return TASK_TEMPERATURES.get(task, 0.7)


def build_provider(settings: Settings) -> LLMProvider:
    """
    Instantiate the configured provider.

    SDK imports are deferred so only the selected provider's package is loaded.
    """
    logger.info(f"Building LLM provider: {settings.llm_provider}")
    if settings.llm_provider == "gemini":
        from resume_ace.llm.gemini_provider import GeminiProvider
        return GeminiProvider(api_key=settings.api_key)

    if settings.llm_provider == "openai":
        from resume_ace.llm.openai_provider import OpenAIProvider
        return OpenAIProvider(api_key=settings.api_key)

    raise ConfigError(f"Unsupported LLM_PROVIDER: {settings.llm_provider}")
