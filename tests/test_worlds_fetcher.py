import asyncio
import json

import pytest

from src.ai.llm.base import LLMProvider, LLMResponse
from src.ai.llm.prompts import WORLDS_DATA_PROMPT, FIRST_SEASON_YEAR
from src.worlds.errors import (
    UpstreamCallError,
    EmptyUpstreamResponse,
    MalformedJson,
    SchemaValidationFailed,
    SNIPPET_LENGTH,
)
from src.worlds.fetcher import fetch_worlds_data


VALID_SNAPSHOT = {
    "lastUpdated": "2024-11-03T00:00:00Z",
    "seasons": [
        {
            "year": 2011,
            "championTeam": "Fnatic",
            "runnerUpTeam": "against All authority",
            "location": "Jönköping",
            "score": "2-1",
            "keyPlayers": [{"name": "xPeke", "role": "Mid", "team": "Fnatic", "imageUrl": "", "bio": ""}],
            "highlightVideos": [{"title": "Final", "url": "https://youtube.com/watch?v=1"}],
        }
    ],
}


class FakeProvider(LLMProvider):
    def __init__(self, raw=None, error=None):
        self.raw = raw
        self.error = error
        self.calls = []

    async def create_response(self, input, model, web_search=True) -> LLMResponse:
        self.calls.append({"input": input, "model": model, "web_search": web_search})
        if self.error:
            raise self.error
        return LLMResponse(model=model, raw_response=self.raw)

    @property
    def is_available(self) -> bool:
        return True


def test_returns_validated_snapshot_and_sends_fixed_prompt():
    provider = FakeProvider(raw={"output_text": json.dumps(VALID_SNAPSHOT)})

    data = asyncio.run(fetch_worlds_data(provider, "gpt-5.1"))

    assert data == VALID_SNAPSHOT
    assert provider.calls == [{"input": WORLDS_DATA_PROMPT, "model": "gpt-5.1", "web_search": True}]
    assert str(FIRST_SEASON_YEAR) in WORLDS_DATA_PROMPT


def test_fenced_json_in_output_parts_is_accepted():
    text = "```json\n" + json.dumps(VALID_SNAPSHOT) + "\n```"
    provider = FakeProvider(raw={"output": [{"type": "message", "content": [{"type": "output_text", "text": text}]}]})

    assert asyncio.run(fetch_worlds_data(provider, "m")) == VALID_SNAPSHOT


def test_transport_failure_propagates():
    provider = FakeProvider(error=UpstreamCallError("connection refused"))

    with pytest.raises(UpstreamCallError):
        asyncio.run(fetch_worlds_data(provider, "m"))


def test_empty_text_fails():
    for raw in ({}, {"output": []}, {"output_text": "```json\n```"}):
        with pytest.raises(EmptyUpstreamResponse):
            asyncio.run(fetch_worlds_data(FakeProvider(raw=raw), "m"))


def test_malformed_json_keeps_a_bounded_snippet():
    text = "Here is your data: " + "x" * 1000
    provider = FakeProvider(raw={"output_text": text})

    with pytest.raises(MalformedJson) as exc_info:
        asyncio.run(fetch_worlds_data(provider, "m"))

    assert exc_info.value.snippet == text[:SNIPPET_LENGTH]
    assert len(exc_info.value.snippet) == SNIPPET_LENGTH


def test_schema_failure():
    provider = FakeProvider(raw={"output_text": json.dumps({"seasons": [{"year": 2011}]})})

    with pytest.raises(SchemaValidationFailed):
        asyncio.run(fetch_worlds_data(provider, "m"))
