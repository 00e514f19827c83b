"""
Worlds Schema Validation

Structural checks applied to parsed upstream JSON before it is trusted.
Season scalars are checked; player and video entries are not.
"""

from numbers import Real
from typing import Any


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_season(season: Any) -> bool:
    """Check a single season record."""
    if not isinstance(season, dict):
        return False

    champion = season.get("championTeam")
    return (
        _is_number(season.get("year"))
        and isinstance(champion, str)
        and len(champion) > 0
        and isinstance(season.get("runnerUpTeam"), str)
        and isinstance(season.get("location"), str)
        and isinstance(season.get("score"), str)
        and isinstance(season.get("keyPlayers"), list)
        and isinstance(season.get("highlightVideos"), list)
    )


def validate_worlds(data: Any) -> bool:
    """
    Check that parsed JSON looks like a WorldsResponse.

    All-or-nothing: one bad season rejects the whole document.

    Args:
        data: Any value produced by json.loads

    Returns:
        True if data is an object whose seasons list is entirely valid
    """
    if not isinstance(data, dict):
        return False

    seasons = data.get("seasons")
    if not isinstance(seasons, list):
        return False

    return all(validate_season(season) for season in seasons)
