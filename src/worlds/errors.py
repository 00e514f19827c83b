"""
Worlds Error Taxonomy

Two tiers: detailed internal errors that are logged, and the generic
PublicError that is shown to HTTP callers. to_public_error() is the only
bridge between them.
"""

from typing import Optional


SNIPPET_LENGTH = 300

GENERIC_DATA_ERROR = "Failed to load Worlds data. Please try again later."
GENERIC_CHAT_ERROR = "Failed to get an answer. Please try again later."


class WorldsError(Exception):
    """Base class for internal errors."""

    kind = "worlds_error"


class InvalidInput(WorldsError):
    """The caller sent a request with the wrong shape."""

    kind = "invalid_input"


class UpstreamCallError(WorldsError):
    """The completion API could not be reached or rejected the call."""

    kind = "upstream_call_error"


class UpstreamContentError(WorldsError):
    """The completion API answered, but with unusable content."""

    kind = "upstream_content_error"


class EmptyUpstreamResponse(UpstreamContentError):
    kind = "empty_upstream_response"


class MalformedJson(UpstreamContentError):
    """Response text is not valid JSON. Keeps a bounded snippet for logs."""

    kind = "malformed_json"

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.snippet = text[:SNIPPET_LENGTH]


class SchemaValidationFailed(UpstreamContentError):
    kind = "schema_validation_failed"


class PublicError(Exception):
    """Error safe to render to an HTTP caller."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def to_public_error(exc: Exception, generic_message: Optional[str] = None) -> PublicError:
    """
    Map an internal error to the error shown to callers.

    InvalidInput keeps its message with a 400. Everything else collapses
    to the generic message with a 500; internal detail never crosses over.
    """
    if isinstance(exc, InvalidInput):
        return PublicError(str(exc), status_code=400)
    return PublicError(generic_message or GENERIC_DATA_ERROR, status_code=500)
