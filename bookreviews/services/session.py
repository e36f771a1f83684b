"""
Session service: login, session storage and per-request authorization.

Sessions live in memory, keyed by a random session ID. The ID reaches
the client in an express-session style signed cookie:
    s%3A{session_id}.{signature}
Each session holds the access token minted at login plus the username it
was issued to. A request is authorized only while that token verifies.
"""

import base64
import hashlib
import hmac
import logging
import secrets
import threading
import time
from collections.abc import Callable
from urllib.parse import quote, unquote

from bookreviews.config import Settings
from bookreviews.exceptions import ForbiddenError, UnauthorizedError, ValidationError
from bookreviews.models.session import Session
from bookreviews.services.tokens import AccessToken, InvalidTokenError, TokenAuthority
from bookreviews.services.users import UserDirectory

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory session table. One authorization entry per session ID."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._sessions: dict[str, Session] = {}
        self._lock = threading.RLock()
        self.clock = clock

    def __len__(self) -> int:
        return len(self._sessions)

    def save(self, session: Session) -> None:
        """Store a session, overwriting any entry under the same ID."""
        with self._lock:
            self._sessions[session.sid] = session

    def get(self, session_id: str) -> Session | None:
        """
        Get a session by ID.

        Returns None if the session doesn't exist or is expired.
        """
        session = self._sessions.get(session_id)
        if session and session.is_expired(self.clock()):
            # Clean up expired session
            self.delete(session_id)
            return None
        return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def cleanup_expired(self) -> int:
        """
        Delete all expired sessions.

        Returns the number of sessions deleted.
        """
        now = self.clock()
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)


class SessionService:
    """
    Ties the user directory, token authority and session store together.

    State per session ID: Anonymous -> Authenticated -> Expired.
    """

    def __init__(
        self,
        users: UserDirectory,
        sessions: SessionStore,
        tokens: TokenAuthority,
        settings: Settings,
    ):
        self.users = users
        self.sessions = sessions
        self.tokens = tokens
        self.settings = settings

    def _generate_session_id(self) -> str:
        """Generate a secure random session ID."""
        return secrets.token_urlsafe(32)

    def login(
        self,
        username: str | None,
        password: str | None,
        session_id: str | None = None,
    ) -> tuple[str, AccessToken]:
        """
        Check credentials, mint a token and bind it to a session.

        Reuses ``session_id`` when the caller already has one, so a new
        login overwrites that session's authorization entry. Returns the
        session ID and the issued token.

        Raises ValidationError for missing fields and UnauthorizedError
        for bad credentials. Sessions are untouched on failure.
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        if not self.users.verify_credentials(username, password):
            logger.warning("Failed login attempt for %s", username)
            raise UnauthorizedError("Invalid Login. Check username and password")

        token = self.tokens.issue(username)
        sid = session_id or self._generate_session_id()
        self.sessions.save(
            Session(
                sid=sid,
                access_token=token.token,
                username=username,
                expires_at=min(
                    token.expires_at,
                    self.sessions.clock() + self.settings.session_max_age,
                ),
            )
        )

        logger.info("User %s logged in", username)
        return sid, token

    def authorize(self, session_id: str | None, now: float | None = None) -> str:
        """
        Resolve the username bound to a session.

        Raises ForbiddenError("User not logged in") when there is no
        session entry, and ForbiddenError("User not authenticated") when
        the stored token fails signature or expiry checks.
        """
        session = self.sessions.get(session_id) if session_id else None
        if session is None:
            raise ForbiddenError("User not logged in")

        try:
            token = self.tokens.verify(session.access_token, now=now)
        except InvalidTokenError as e:
            logger.warning("Rejected session token for %s: %s", session.username, e)
            raise ForbiddenError("User not authenticated") from e

        if token.username != session.username:
            logger.warning("Session user %s does not match token", session.username)
            raise ForbiddenError("User not authenticated")

        return session.username


def _signature(session_id: str, secret: str) -> str:
    digest = hmac.new(secret.encode(), session_id.encode(), hashlib.sha256).digest()
    return base64.urlsafe_b64encode(digest).decode().rstrip("=")


def sign_session_cookie(session_id: str, secret: str) -> str:
    """Build the cookie value for a session ID: s%3A{id}.{signature}."""
    return quote(f"s:{session_id}.{_signature(session_id, secret)}", safe="")


def parse_session_cookie(cookie_value: str | None, secret: str) -> str | None:
    """
    Extract the session ID from a signed session cookie.

    After URL decoding the value is s:{session_id}.{signature}. Returns
    None for unsigned values or a signature mismatch.
    """
    if not cookie_value:
        return None

    decoded = unquote(cookie_value)
    if not decoded.startswith("s:"):
        return None

    session_id, sep, signature = decoded[2:].rpartition(".")
    if not sep or not session_id:
        return None

    if not hmac.compare_digest(signature, _signature(session_id, secret)):
        logger.warning("Session cookie signature mismatch")
        return None

    return session_id
