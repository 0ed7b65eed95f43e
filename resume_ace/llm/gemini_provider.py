"""
Google Gemini provider implementation.
"""
import logging
from typing import Optional

import httpx
from google import genai
from google.genai import errors, types

from resume_ace.core.errors import GenerationError
from resume_ace.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini provider using the google-genai SDK's async client."""
    name = "gemini"

    def __init__(self, api_key: str):
        """Initialize Gemini client."""
        if not api_key:
            raise ValueError("GEMINI_API_KEY not configured")
        self.client = genai.Client(api_key=api_key)
        logger.info("Gemini provider initialized")

    async def generate(
        self,
        prompt: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = True,
    ) -> LLMResponse:
        config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_tokens or 2048,
            response_mime_type="application/json" if json_mode else None,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=config,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error: {e}", exc_info=True)
            raise GenerationError(f"Gemini API error: {e.message or e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini transport error: {e}", exc_info=True)
            raise GenerationError(f"Gemini transport error: {e}") from e

        usage = response.usage_metadata
        return LLMResponse(
            content=response.text or "",
            tokens_in=(usage.prompt_token_count or 0) if usage else 0,
            tokens_out=(usage.candidates_token_count or 0) if usage else 0,
            model=model,
        )
