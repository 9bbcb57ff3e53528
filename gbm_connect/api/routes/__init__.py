"""
GBM Connect — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .matches import router as matches_router

__all__ = [
    'health_router',
    'matches_router',
]
