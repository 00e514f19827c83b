"""
Worlds Service

Request handlers behind the HTTP routes: serve or refresh the cached
snapshot, and answer chat questions with the snapshot as context.
"""

import logging
from typing import Any, Optional

from src.ai.llm.base import LLMProvider
from src.ai.llm.cache import SnapshotCache
from src.ai.llm.config import LLMConfig
from src.ai.llm.normalize import extract_text
from src.ai.llm.prompts import CHAT_SYSTEM, CHAT_USER_TEMPLATE, NO_ANSWER_FALLBACK
from src.worlds.context import build_context_summary
from src.worlds.errors import (
    WorldsError,
    InvalidInput,
    GENERIC_DATA_ERROR,
    GENERIC_CHAT_ERROR,
    to_public_error,
)
from src.worlds.fetcher import fetch_worlds_data

logger = logging.getLogger(__name__)


class WorldsService:
    """
    Owns the snapshot cache and the provider used to fill it.

    One instance lives on the FastAPI app. Provider and cache are passed
    in, so a different provider or clock can be swapped in.
    """

    def __init__(
        self,
        provider: LLMProvider,
        cache: Optional[SnapshotCache] = None,
        config: Optional[LLMConfig] = None
    ):
        self.provider = provider
        self.config = config or LLMConfig()
        self.cache = cache or SnapshotCache(ttl_seconds=self.config.cache_ttl_seconds)

    async def get_tournament_data(self, force_refresh: bool = False) -> dict:
        """
        Return the cached snapshot, fetching a new one when needed.

        Args:
            force_refresh: Skip the freshness check and always fetch

        Raises:
            PublicError: Generic 500 when the fetch fails for any reason
        """
        if not force_refresh:
            cached = self.cache.get_fresh()
            if cached is not None:
                logger.debug("Serving cached Worlds snapshot")
                return cached

        logger.info("Fetching Worlds snapshot (force_refresh=%s)", force_refresh)
        try:
            data = await fetch_worlds_data(self.provider, self.config.data_model)
        except WorldsError as e:
            logger.error("Worlds fetch failed [%s]: %s", e.kind, e)
            raise to_public_error(e, GENERIC_DATA_ERROR) from e

        self.cache.replace(data, model=self.config.data_model)
        return data

    def build_messages(self, question: str) -> list[dict[str, str]]:
        """Chat messages for a question, with the cached summary as context."""
        context = build_context_summary(self.cache.snapshot)
        return [
            {"role": "system", "content": CHAT_SYSTEM},
            {"role": "user", "content": CHAT_USER_TEMPLATE.format(
                question=question,
                context=context
            )},
        ]

    async def answer_question(self, question: Any) -> str:
        """
        Answer a free-form question about Worlds.

        Args:
            question: Caller-supplied value; must be a non-empty string

        Raises:
            PublicError: 400 for a bad question, generic 500 for upstream failures
        """
        if not question or not isinstance(question, str):
            error = InvalidInput("The question field is required.")
            raise to_public_error(error) from error

        messages = self.build_messages(question)

        try:
            response = await self.provider.create_response(
                input=messages,
                model=self.config.chat_model,
                web_search=True
            )
        except WorldsError as e:
            logger.error("Worlds chat failed [%s]: %s", e.kind, e)
            raise to_public_error(e, GENERIC_CHAT_ERROR) from e

        reply = extract_text(response.raw_response).strip()
        return reply or NO_ANSWER_FALLBACK
