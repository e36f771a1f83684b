"""
Authentication API router.
Handles login and sets the session cookie.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from bookreviews.config import Settings
from bookreviews.middleware.auth import (
    get_app_settings,
    get_session_id,
    get_session_service,
)
from bookreviews.schemas.auth import CredentialsRequest, LoginResponse
from bookreviews.services.session import SessionService, sign_session_cookie

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    data: CredentialsRequest,
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    service: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Authenticate with username and password.

    Mints an access token, stores it in the session and sets the
    session cookie. The token is also returned in the body.
    """
    sid, token = service.login(data.username, data.password, session_id=session_id)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=sign_session_cookie(sid, settings.session_secret),
        max_age=settings.session_cookie_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
        path=settings.session_cookie_path,
    )

    return LoginResponse(
        message="User successfully logged in",
        accessToken=token.token,
    )
