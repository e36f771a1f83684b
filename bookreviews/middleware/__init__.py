"""
Middleware package.
"""

from bookreviews.middleware.auth import (
    get_app_settings,
    get_current_username,
    get_session_id,
    get_session_service,
)

__all__ = [
    "get_app_settings",
    "get_current_username",
    "get_session_id",
    "get_session_service",
]
