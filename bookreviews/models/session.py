"""
Server-side session model.
"""

import time
from dataclasses import dataclass


@dataclass
class Session:
    """
    Session state addressed by the key carried in the session cookie.

    Holds the authorization entry written on login: the access token
    and the username it was issued to.
    """

    sid: str
    access_token: str
    username: str
    expires_at: float  # Unix timestamp, seconds

    def is_expired(self, now: float | None = None) -> bool:
        """Check if the session has expired."""
        if now is None:
            now = time.time()
        return now >= self.expires_at

    def __repr__(self) -> str:
        return f"<Session {self.sid[:8]}... user={self.username}>"
