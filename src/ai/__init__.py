"""
Worlds Codex AI Layer

Upstream completion API integration used by the tournament service.
"""

from . import llm

__all__ = ['llm']
