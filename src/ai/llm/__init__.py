"""
Worlds Codex LLM Subsystem

Completion API access, response normalization and snapshot caching.
"""

from .base import LLMProvider, LLMResponse
from .config import LLMConfig
from .cache import SnapshotCache, CacheEntry
from .api_provider import OpenAIProvider, get_provider
from .normalize import (
    FlattenedText,
    OutputParts,
    UnrecognizedShape,
    classify_response,
    extract_text,
    strip_code_fence,
    normalize_response,
)

__all__ = [
    'LLMProvider',
    'LLMResponse',
    'LLMConfig',
    'SnapshotCache',
    'CacheEntry',
    'OpenAIProvider',
    'get_provider',
    'FlattenedText',
    'OutputParts',
    'UnrecognizedShape',
    'classify_response',
    'extract_text',
    'strip_code_fence',
    'normalize_response',
]
