"""
Authentication dependencies.

Provides FastAPI dependencies that resolve the session cookie and
protect the review routes.
"""

from typing import Optional

from fastapi import Depends, Request

from bookreviews.config import Settings
from bookreviews.database import Database, get_db
from bookreviews.services.session import SessionService, parse_session_cookie


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


async def get_session_id(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Optional[str]:
    """
    Extract session ID from cookie.

    Handles the express-session signed cookie format.
    """
    cookie = request.cookies.get(settings.session_cookie_name)
    return parse_session_cookie(cookie, settings.session_secret)


def get_session_service(
    request: Request,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> SessionService:
    return SessionService(
        users=db.users,
        sessions=db.sessions,
        tokens=request.app.state.tokens,
        settings=settings,
    )


async def get_current_username(
    session_id: Optional[str] = Depends(get_session_id),
    service: SessionService = Depends(get_session_service),
) -> str:
    """
    Username bound to the caller's session.

    Raises 403 if there is no session or its token no longer verifies.
    This is the only source of identity for review writes.
    """
    return service.authorize(session_id)
