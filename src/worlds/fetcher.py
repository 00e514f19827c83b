"""
Worlds Data Fetcher

One round trip to the completion API: prompt, normalize, parse, validate.
Caching is left to the caller.
"""

import json
import logging

from src.ai.llm.base import LLMProvider
from src.ai.llm.normalize import normalize_response
from src.ai.llm.prompts import WORLDS_DATA_PROMPT
from .errors import EmptyUpstreamResponse, MalformedJson, SchemaValidationFailed
from .validation import validate_worlds

logger = logging.getLogger(__name__)


async def fetch_worlds_data(provider: LLMProvider, model: str) -> dict:
    """
    Fetch a fresh Worlds snapshot from the completion API.

    Args:
        provider: Completion provider to call
        model: Model identifier for the request

    Returns:
        The parsed snapshot, guaranteed to pass validate_worlds()

    Raises:
        UpstreamCallError: The provider call failed (propagated as is)
        EmptyUpstreamResponse: No text could be extracted
        MalformedJson: The text is not valid JSON
        SchemaValidationFailed: The JSON does not look like a WorldsResponse
    """
    response = await provider.create_response(
        input=WORLDS_DATA_PROMPT,
        model=model,
        web_search=True
    )

    text = normalize_response(response.raw_response)
    if not text:
        raise EmptyUpstreamResponse("Empty response from completion API")

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        error = MalformedJson(f"Response is not valid JSON: {e}", text)
        logger.error("Failed to parse worlds data: %s (snippet: %r)", e, error.snippet)
        raise error from e

    if not validate_worlds(parsed):
        raise SchemaValidationFailed("Validation failed for worlds data")

    return parsed
