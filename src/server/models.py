"""
Pydantic Models for Worlds Codex API

Data transfer objects describing the JSON contract with the front end.
Snapshot models document the shape only; snapshots are served exactly as
they were validated and cached.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


# =============================================================================
# Snapshot Models
# =============================================================================

class PlayerProfile(BaseModel):
    """A key player of a season."""
    model_config = ConfigDict(extra="allow")

    name: str = ""
    role: str = ""
    team: str = ""
    imageUrl: str = ""
    bio: str = ""


class VideoLink(BaseModel):
    """A highlight video."""
    model_config = ConfigDict(extra="allow")

    title: str = ""
    url: str = ""


class SeasonRecord(BaseModel):
    """One World Championship edition."""
    model_config = ConfigDict(extra="allow")

    year: float
    championTeam: str
    runnerUpTeam: str
    location: str
    score: str
    keyPlayers: list[PlayerProfile] = Field(default_factory=list)
    highlightVideos: list[VideoLink] = Field(default_factory=list)


class TournamentSnapshot(BaseModel):
    """All seasons, as returned by GET /api/worlds."""
    model_config = ConfigDict(extra="allow")

    lastUpdated: Optional[str] = None
    seasons: list[SeasonRecord] = Field(default_factory=list)


# =============================================================================
# Chat Models
# =============================================================================

class ChatResponse(BaseModel):
    """Answer to a chat question."""
    reply: str


# =============================================================================
# Error / Status Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Error body for every failed API call."""
    error: str


class HealthResponse(BaseModel):
    """Health check body."""
    status: str
    service: str
    cache: dict
