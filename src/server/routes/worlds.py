"""
Worlds Routes

Endpoints for the tournament snapshot and the chat assistant.
"""

import json

from fastapi import APIRouter, Depends, Query, Request

from ..models import TournamentSnapshot, ChatResponse, ErrorResponse
from ..services.worlds_service import WorldsService

router = APIRouter(tags=["worlds"])


def get_worlds_service(request: Request) -> WorldsService:
    """Service instance owned by the running app."""
    return request.app.state.worlds_service


@router.get(
    "/worlds",
    responses={
        200: {"model": TournamentSnapshot},
        500: {"model": ErrorResponse},
    },
)
async def get_worlds(
    refresh: str = Query("0", description="1 forces a refetch, bypassing the cache"),
    service: WorldsService = Depends(get_worlds_service)
) -> dict:
    """
    Get the Worlds snapshot.

    Served from cache for 24 hours unless refresh=1.
    """
    return await service.get_tournament_data(force_refresh=refresh == "1")


async def _read_json_object(request: Request) -> dict:
    """Request body as a dict; anything else counts as an empty body."""
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


@router.post(
    "/worlds-chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def worlds_chat(
    request: Request,
    service: WorldsService = Depends(get_worlds_service)
) -> ChatResponse:
    """
    Ask the Worlds assistant a question.

    Expected body: { question: string }
    """
    payload = await _read_json_object(request)
    reply = await service.answer_question(payload.get("question"))
    return ChatResponse(reply=reply)
