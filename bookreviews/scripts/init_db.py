"""
Catalog seed data.

The catalog is fixed: ten classic titles keyed by ISBN 1-10, loaded once
at startup. Idempotent - seeding an already seeded store keeps its
reviews.

Usage:
    python -m bookreviews.scripts.init_db
"""

import logging

from bookreviews.models.book import Book
from bookreviews.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

SEED_BOOKS: list[tuple[int, str, str]] = [
    (1, "Chinua Achebe", "Things Fall Apart"),
    (2, "Hans Christian Andersen", "Fairy tales"),
    (3, "Dante Alighieri", "The Divine Comedy"),
    (4, "Unknown", "The Epic Of Gilgamesh"),
    (5, "Unknown", "The Book Of Job"),
    (6, "Unknown", "One Thousand and One Nights"),
    (7, "Unknown", "Njál's Saga"),
    (8, "Jane Austen", "Pride and Prejudice"),
    (9, "Honoré de Balzac", "Le Père Goriot"),
    (10, "Samuel Beckett", "Molloy, Malone Dies, The Unnamable, the trilogy"),
]


def seed_catalog(store: CatalogStore) -> int:
    """Load the seed books into a store. Returns the number of new books."""
    before = len(store)
    for isbn, author, title in SEED_BOOKS:
        store.add(Book(id=str(isbn), author=author, title=title))
    added = len(store) - before
    logger.info("Seeded catalog with %d books (%d total)", added, len(store))
    return added


def main():
    store = CatalogStore()
    seed_catalog(store)
    for book in store:
        print(f"  {book.id:>3}  {book.title} - {book.author}")


if __name__ == "__main__":
    main()
