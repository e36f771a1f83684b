"""
Pydantic schemas for books and reviews.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class BookResponse(BaseModel):
    """A single catalog book with its reviews keyed by username."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    author: str
    title: str
    reviews: Dict[str, str] = {}


class ReviewEntry(BaseModel):
    username: str
    review: str


class ReviewsResponse(BaseModel):
    """Response for GET /books/{isbn}/reviews."""
    reviews: List[ReviewEntry] = []


class ReviewRequest(BaseModel):
    """Request model for adding or updating a review."""
    review: Optional[str] = None
