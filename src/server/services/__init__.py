"""
Server Services
"""

from .worlds_service import WorldsService

__all__ = ['WorldsService']
