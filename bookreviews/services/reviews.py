"""
Review management for authenticated users.

The username passed in here must come from session authorization,
never from the request body.
"""

import logging

from bookreviews.exceptions import NotFoundError, ReviewNotFoundError
from bookreviews.models.book import Book
from bookreviews.services.catalog import CatalogStore

logger = logging.getLogger(__name__)


class ReviewService:
    """Create, replace and delete a user's single review on a book."""

    def __init__(self, store: CatalogStore | None):
        self.store = store

    def _get_book(self, isbn: int | str) -> Book:
        book = self.store.get(isbn) if self.store is not None else None
        if book is None:
            raise NotFoundError("Book", isbn)
        return book

    def upsert_review(self, isbn: int | str, username: str, text: str) -> bool:
        """
        Set the user's review on a book, replacing any previous one.

        Returns True if a review was created, False if one was replaced.
        Raises NotFoundError if the book does not exist.
        """
        book = self._get_book(isbn)
        with self.store.lock:
            created = username not in book.reviews
            book.reviews[username] = text

        logger.info(
            "%s review by %s on book %s",
            "Added" if created else "Updated",
            username,
            book.id,
        )
        return created

    def delete_review(self, isbn: int | str, username: str) -> None:
        """
        Remove the user's review from a book.

        Raises NotFoundError if the book does not exist and
        ReviewNotFoundError if the user has no review on it.
        """
        book = self._get_book(isbn)
        with self.store.lock:
            if username not in book.reviews:
                raise ReviewNotFoundError()
            del book.reviews[username]

        logger.info("Deleted review by %s on book %s", username, book.id)
