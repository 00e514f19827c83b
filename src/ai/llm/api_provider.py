"""
API LLM Provider

OpenAI Responses API provider with optional web search.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from src.worlds.errors import UpstreamCallError
from .base import LLMProvider, LLMResponse, ResponseInput
from .config import LLMConfig, DEFAULT_API_BASE

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """
    LLM provider using the OpenAI Responses API.

    Requires OPENAI_API_KEY environment variable.
    """

    def __init__(
        self,
        api_key: str,
        api_base: str = DEFAULT_API_BASE,
        timeout: Optional[float] = None
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            api_base: Base URL of the API
            timeout: Total request timeout in seconds (None keeps aiohttp's default)
        """
        self.api_key = api_key
        self.api_base = api_base.rstrip('/')
        self.timeout = timeout

    @property
    def is_available(self) -> bool:
        """Check if API key is set."""
        return bool(self.api_key)

    def _build_payload(self, input: ResponseInput, model: str, web_search: bool) -> dict:
        payload = {
            "model": model,
            "input": input,
        }
        if web_search:
            payload["tools"] = [{"type": "web_search"}]
        return payload

    async def create_response(
        self,
        input: ResponseInput,
        model: str,
        web_search: bool = True
    ) -> LLMResponse:
        """Request a completion from the Responses API."""
        if self.timeout is not None:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
        else:
            timeout = aiohttp.ClientTimeout()

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    f"{self.api_base}/responses",
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json"
                    },
                    json=self._build_payload(input, model, web_search)
                ) as resp:
                    if resp.status != 200:
                        error_text = await resp.text()
                        raise UpstreamCallError(
                            f"OpenAI error {resp.status}: {error_text[:300]}"
                        )

                    try:
                        data = await resp.json()
                    except ValueError as e:
                        raise UpstreamCallError(f"OpenAI returned a non-JSON body: {e}") from e
        except aiohttp.ClientError as e:
            raise UpstreamCallError(f"OpenAI request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise UpstreamCallError("OpenAI request timed out") from e

        usage = {}
        if isinstance(data, dict):
            usage = data.get("usage") or {}
        logger.debug("Completion received from %s", model)

        return LLMResponse(
            model=model,
            raw_response=data,
            tokens_used=usage.get("total_tokens", 0)
        )


def get_provider(config: LLMConfig) -> LLMProvider:
    """
    Get the completion provider for a config.

    A provider without a key is still returned so the server can start;
    calls through it fail upstream and surface as UpstreamCallError.
    """
    return OpenAIProvider(
        api_key=config.openai_key,
        api_base=config.api_base,
        timeout=config.timeout
    )
