"""
Worlds Tournament Domain

Validation, fetching and context building for World Championship data.
"""

from .errors import (
    WorldsError,
    InvalidInput,
    UpstreamCallError,
    UpstreamContentError,
    EmptyUpstreamResponse,
    MalformedJson,
    SchemaValidationFailed,
    PublicError,
    to_public_error,
)
from .validation import validate_worlds
from .fetcher import fetch_worlds_data
from .context import build_context_summary

__all__ = [
    'WorldsError',
    'InvalidInput',
    'UpstreamCallError',
    'UpstreamContentError',
    'EmptyUpstreamResponse',
    'MalformedJson',
    'SchemaValidationFailed',
    'PublicError',
    'to_public_error',
    'validate_worlds',
    'fetch_worlds_data',
    'build_context_summary',
]
