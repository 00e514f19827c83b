"""
API Routes
"""

from .worlds import router as worlds_router
from .static import router as static_router

__all__ = ['worlds_router', 'static_router']
