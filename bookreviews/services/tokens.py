"""
Access token issuing and verification.

Tokens are self-contained JWTs signed with the process-wide secret:
    {"username": ..., "iat": <issued at>, "exp": <expires at>}
so verification needs no store lookup.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import jwt

from bookreviews.config import Settings

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Token signature, payload or expiry check failed."""


@dataclass(frozen=True)
class AccessToken:
    token: str
    username: str
    issued_at: int
    expires_at: int


class TokenAuthority:
    """Mints and verifies access tokens."""

    def __init__(
        self,
        secret: str,
        ttl: int = 3600,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ):
        self.secret = secret
        self.ttl = ttl
        self.algorithm = algorithm
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TokenAuthority":
        return cls(
            secret=settings.access_token_secret,
            ttl=settings.access_token_ttl,
            algorithm=settings.access_token_algorithm,
            **kwargs,
        )

    def issue(self, username: str) -> AccessToken:
        """Mint a token for a user, valid for ``ttl`` seconds from now."""
        issued_at = int(self.clock())
        expires_at = issued_at + self.ttl
        token = jwt.encode(
            {"username": username, "iat": issued_at, "exp": expires_at},
            self.secret,
            algorithm=self.algorithm,
        )
        return AccessToken(
            token=token,
            username=username,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify(self, token: str, now: float | None = None) -> AccessToken:
        """
        Check signature and expiry and return the decoded token.

        Expiry is checked here against ``now`` (or the authority's clock)
        rather than by PyJWT, so a token is valid strictly before ``exp``.
        Raises InvalidTokenError.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", "iat", "username"],
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e)) from e

        if now is None:
            now = self.clock()
        expires_at = int(payload["exp"])
        if now >= expires_at:
            raise InvalidTokenError("Token has expired")

        username = payload["username"]
        if not isinstance(username, str) or not username:
            raise InvalidTokenError("Token has no username")

        return AccessToken(
            token=token,
            username=username,
            issued_at=int(payload["iat"]),
            expires_at=expires_at,
        )
