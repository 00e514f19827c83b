"""
Worlds Codex API Server

FastAPI backend for the World Championship encyclopedia.
"""

from .main import app, create_app
from .services import WorldsService

__all__ = ['app', 'create_app', 'WorldsService']
