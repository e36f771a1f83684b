"""
Catalog store and the public, read-only query service on top of it.
"""

import logging
import threading
from collections.abc import Iterable, Iterator

from bookreviews.exceptions import NotFoundError
from bookreviews.models.book import Book

logger = logging.getLogger(__name__)


def normalize_isbn(isbn: int | str) -> str:
    """Catalog keys are compared as strings, so 1 and "1" address the same book."""
    return str(isbn)


class CatalogStore:
    """
    Books keyed by ISBN.

    Iteration follows insertion (seed) order. Only the review maps of
    stored books are mutated after seeding.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._books: dict[str, Book] = {}
        self.lock = threading.RLock()
        for book in books:
            self.add(book)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books.values()))

    def __contains__(self, isbn: object) -> bool:
        return isinstance(isbn, (int, str)) and normalize_isbn(isbn) in self._books

    def add(self, book: Book) -> Book:
        """Add a book, keeping an existing entry (and its reviews) if present."""
        key = normalize_isbn(book.id)
        with self.lock:
            existing = self._books.get(key)
            if existing is not None:
                return existing
            book.id = key
            self._books[key] = book
        return book

    def get(self, isbn: int | str) -> Book | None:
        return self._books.get(normalize_isbn(isbn))


class CatalogService:
    """
    Public catalog queries. Never mutates the store.

    A missing store degrades every read to NotFoundError instead of a
    server error.
    """

    def __init__(self, store: CatalogStore | None):
        self.store = store

    def _require_store(self) -> CatalogStore:
        if self.store is None:
            logger.warning("Catalog store unavailable")
            raise NotFoundError("Books")
        return self.store

    def list_all(self) -> list[Book]:
        """Full catalog snapshot in catalog order."""
        return list(self._require_store())

    def get_by_key(self, isbn: int | str) -> Book:
        """Look up one book by ISBN. Raises NotFoundError."""
        book = self._require_store().get(isbn)
        if book is None:
            raise NotFoundError("Book", isbn)
        return book

    def find_by_author(self, author: str) -> list[Book]:
        """Books whose author matches exactly (case-sensitive). May be empty."""
        return [book for book in self._require_store() if book.author == author]

    def find_by_title(self, title: str) -> list[Book]:
        """Books whose title matches exactly (case-sensitive). May be empty."""
        return [book for book in self._require_store() if book.title == title]

    def get_reviews(self, isbn: int | str) -> list[dict[str, str]]:
        """Reviews of a book as username/review pairs. Raises NotFoundError."""
        book = self.get_by_key(isbn)
        return [
            {"username": username, "review": review}
            for username, review in book.reviews.items()
        ]
