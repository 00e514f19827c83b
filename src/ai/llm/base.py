"""
LLM Provider Base Classes

Abstract interface for completion API providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Any, Union


# A prompt string or a list of {"role": ..., "content": ...} messages
ResponseInput = Union[str, list[dict[str, str]]]


@dataclass
class LLMResponse:
    """Response from a completion call."""
    model: str
    raw_response: Optional[Any] = None
    tokens_used: int = 0


class LLMProvider(ABC):
    """
    Abstract base class for completion API providers.

    Providers hand back the decoded upstream payload untouched;
    text extraction is left to the response normalizer.
    """

    @abstractmethod
    async def create_response(
        self,
        input: ResponseInput,
        model: str,
        web_search: bool = True
    ) -> LLMResponse:
        """
        Request a completion.

        Args:
            input: Prompt string or list of chat messages
            model: Model identifier
            web_search: Whether to enable the web search tool

        Returns:
            LLMResponse wrapping the raw upstream payload

        Raises:
            UpstreamCallError: If the API cannot be reached or rejects the call
        """
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if this provider is configured and ready."""
        pass
