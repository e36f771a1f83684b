"""
Pydantic schemas for registration and login.
"""

from typing import Optional

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    """
    Request model for register and login.

    Fields are optional here so that a missing value is reported as a
    400 by the service instead of a 422 schema error.
    """
    username: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    """Response model for successful login."""
    message: str
    accessToken: str  # camelCase, matches existing clients
