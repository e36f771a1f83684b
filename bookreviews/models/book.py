"""
Book model.
One catalog entry keyed by its ISBN.
"""

from dataclasses import dataclass, field


@dataclass
class Book:
    """A catalog book with its reviews keyed by username."""

    id: str
    author: str
    title: str
    # At most one review per username; writes replace, never append
    reviews: dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"<Book {self.id}: {self.title!r} ({len(self.reviews)} reviews)>"
