"""
Generation client: sends a task's prompt to the configured LLM provider.
"""
import logging
import time
from dataclasses import dataclass

from resume_ace.core.config import Settings
from resume_ace.core.errors import GenerationError
from resume_ace.llm.provider import LLMProvider
from resume_ace.llm.router import get_model_for_task, get_temperature_for_task
from resume_ace.services.prompts import TaskKind

logger = logging.getLogger(__name__)


@dataclass
class GenerationRequest:
    task: TaskKind
    prompt: str


class GenerationClient:
    """Thin adapter over an LLMProvider. No retries; failures propagate."""

    def __init__(self, provider: LLMProvider, settings: Settings):
        self.provider = provider
        self.settings = settings

    async def generate(self, request: GenerationRequest) -> str:
        """
        Return the raw text of the provider's first response.

        Raises:
            GenerationError: Provider failure of any kind
        """
        model = get_model_for_task(request.task, self.settings)
        logger.info(f"Sending {request.task.value} request to {self.provider.name} ({model})")
        started = time.monotonic()

        try:
            response = await self.provider.generate(
                request.prompt,
                model=model,
                temperature=get_temperature_for_task(request.task),
            )
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"LLM call failed for {request.task.value}: {e}", exc_info=True)
            raise GenerationError(f"AI generation failed: {e}") from e

        logger.info(
            f"LLM call completed: task={request.task.value}, model={response.model or model}, "
            f"tokens={response.tokens_in + response.tokens_out}, "
            f"elapsed={time.monotonic() - started:.2f}s"
        )
        return response.content
