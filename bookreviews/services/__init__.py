"""
Services package for business logic.
"""

from bookreviews.services.catalog import CatalogService, CatalogStore
from bookreviews.services.reviews import ReviewService
from bookreviews.services.session import SessionService, SessionStore, parse_session_cookie
from bookreviews.services.tokens import TokenAuthority
from bookreviews.services.users import UserDirectory

__all__ = [
    "CatalogService",
    "CatalogStore",
    "ReviewService",
    "SessionService",
    "SessionStore",
    "TokenAuthority",
    "UserDirectory",
    "parse_session_cookie",
]
