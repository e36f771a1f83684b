"""
User account model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserAccount:
    """Registered user. Username is unique and case-sensitive."""

    username: str
    # Plaintext; see verify_credentials
    password: str

    def __repr__(self) -> str:
        return f"<UserAccount {self.username}>"
