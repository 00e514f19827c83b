"""
Response Normalization

Turns the raw completion payload into plain text. The API may hand back
a flattened `output_text` field or a list of output parts; each shape is
classified first, then extracted.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


_FENCE_OPEN = re.compile(r'^```json\n?', re.IGNORECASE)
_FENCE_CLOSE = re.compile(r'```$')


@dataclass
class FlattenedText:
    """Payload with a ready-made output_text field."""
    text: str


@dataclass
class OutputParts:
    """Payload with an ordered list of output parts."""
    parts: list = field(default_factory=list)


@dataclass
class UnrecognizedShape:
    """Payload with neither known shape."""
    pass


ResponseShape = Union[FlattenedText, OutputParts, UnrecognizedShape]


def _field(obj: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def classify_response(raw: Any) -> ResponseShape:
    """Decide which payload shape the raw result has."""
    text = _field(raw, "output_text")
    if isinstance(text, str) and text:
        return FlattenedText(text)

    output = _field(raw, "output")
    if isinstance(output, (list, tuple)):
        return OutputParts(list(output))

    return UnrecognizedShape()


def part_text(part: Any) -> str:
    """
    Text carried by one output part.

    A part can be a plain string, or carry `text` or `content`. A `content`
    list (message items wrapping output_text blocks) is flattened.
    """
    if isinstance(part, str):
        return part

    text = _field(part, "text")
    if isinstance(text, str) and text:
        return text

    content = _field(part, "content")
    if isinstance(content, str):
        return content
    if isinstance(content, (list, tuple)):
        return _join_parts(content)

    return ""


def _join_parts(parts) -> str:
    return "\n".join(text for text in (part_text(p) for p in parts) if text)


def extract_text(raw: Any) -> str:
    """Extract plain text from a raw completion payload. Never raises."""
    shape = classify_response(raw)

    if isinstance(shape, FlattenedText):
        return shape.text
    elif isinstance(shape, OutputParts):
        return _join_parts(shape.parts)
    elif isinstance(shape, UnrecognizedShape):
        return ""

    raise TypeError(f"Unhandled response shape: {type(shape).__name__}")


def strip_code_fence(text: str) -> str:
    """
    Remove a ```json opener and trailing ``` around the text.

    Only the wrapping is touched; content between the fences is kept as is.
    """
    if not text:
        return ""
    text = text.strip()
    text = _FENCE_OPEN.sub('', text, count=1)
    text = _FENCE_CLOSE.sub('', text, count=1)
    return text.strip()


def normalize_response(raw: Any) -> str:
    """Extract the text of a payload and strip code-fence wrapping."""
    return strip_code_fence(extract_text(raw))
