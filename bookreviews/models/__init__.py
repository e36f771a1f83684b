"""
In-memory record types.
"""

from bookreviews.models.book import Book
from bookreviews.models.session import Session
from bookreviews.models.user import UserAccount

__all__ = [
    "Book",
    "Session",
    "UserAccount",
]
