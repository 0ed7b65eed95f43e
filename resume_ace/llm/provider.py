"""
LLM Provider interface for abstracting LLM implementations.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class LLMResponse:
    """Standardized LLM response."""
    content: str
    tokens_in: int = 0
    tokens_out: int = 0
    model: str = ""
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""
    name: str = "base"

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = True,
    ) -> LLMResponse:
        """
        Send a single prompt and return the first candidate's text.

        Args:
            prompt: Complete prompt text
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            json_mode: Ask the provider for a JSON response (a hint only)

        Returns:
            LLMResponse with raw content and token usage

        Raises:
            GenerationError: Transport, quota or model failure
        """
        pass
