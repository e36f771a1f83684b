"""
User directory: registration and credential checks.
"""

import logging
import threading

from bookreviews.exceptions import ConflictError, ValidationError
from bookreviews.models.user import UserAccount

logger = logging.getLogger(__name__)


class UserDirectory:
    """Registered accounts keyed by username (case-sensitive)."""

    def __init__(self):
        self._users: dict[str, UserAccount] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._users)

    def exists(self, username: str) -> bool:
        """Check whether a username is already taken."""
        return username in self._users

    def register(self, username: str | None, password: str | None) -> UserAccount:
        """
        Create a new account.

        Raises ValidationError if either field is missing or empty and
        ConflictError if the username is already registered. Nothing is
        stored on failure.
        """
        if not username or not password:
            raise ValidationError("Unable to register user. Username and password are required")

        with self._lock:
            if self.exists(username):
                raise ConflictError("User already exists!")
            account = UserAccount(username=username, password=password)
            self._users[username] = account

        logger.info("Registered user %s", username)
        return account

    def verify_credentials(self, username: str, password: str) -> bool:
        """True iff an account with exactly this username and password exists."""
        account = self._users.get(username)
        # Note: plaintext comparison, see DESIGN.md
        return account is not None and account.password == password
