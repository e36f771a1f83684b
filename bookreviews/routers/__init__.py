"""
API routers package.
"""

from bookreviews.routers import (
    auth,
    general,
    health,
    reviews,
)

__all__ = [
    "auth",
    "general",
    "health",
    "reviews",
]
