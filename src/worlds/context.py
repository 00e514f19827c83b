"""
Chat Context Summary

Condenses a cached snapshot into the short text handed to the chat model.
"""

from typing import Optional

from src.ai.llm.prompts import CONTEXT_LINE_TEMPLATE, NO_CACHE_CONTEXT


def format_year(year) -> str:
    """Render 2023.0 as 2023; JSON numbers may arrive as floats."""
    if isinstance(year, float) and year.is_integer():
        return str(int(year))
    return str(year)


def build_context_summary(snapshot: Optional[dict]) -> str:
    """
    One line per season, or a placeholder when nothing is cached.

    The snapshot has already passed validation, so every season has
    year, championTeam and runnerUpTeam.
    """
    if not snapshot:
        return NO_CACHE_CONTEXT

    return "\n".join(
        CONTEXT_LINE_TEMPLATE.format(
            year=format_year(season["year"]),
            champion=season["championTeam"],
            runner_up=season["runnerUpTeam"],
        )
        for season in snapshot.get("seasons", [])
    )
