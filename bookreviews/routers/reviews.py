"""
Review management router.

Every route here requires an authorized session; the reviewer is
always the session's user.
"""

from fastapi import APIRouter, Depends

from bookreviews.database import Database, get_db
from bookreviews.exceptions import ValidationError
from bookreviews.middleware.auth import get_current_username
from bookreviews.schemas.auth import MessageResponse
from bookreviews.schemas.book import ReviewRequest
from bookreviews.services.reviews import ReviewService

router = APIRouter(prefix="/reviews")


def get_review_service(db: Database = Depends(get_db)) -> ReviewService:
    return ReviewService(db.catalog)


def require_isbn(isbn: str) -> str:
    if not isbn.strip():
        raise ValidationError("ISBN is required")
    return isbn


@router.put("/{isbn}", response_model=MessageResponse)
async def put_review(
    isbn: str,
    data: ReviewRequest,
    username: str = Depends(get_current_username),
    reviews: ReviewService = Depends(get_review_service),
):
    """
    Add or replace the caller's review of a book.

    One review per user per book: a second PUT overwrites the first.
    """
    isbn = require_isbn(isbn)
    if not data.review:
        raise ValidationError("Review text is required")

    created = reviews.upsert_review(isbn, username, data.review)
    return MessageResponse(message="Review added" if created else "Review updated")


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_review(
    isbn: str,
    username: str = Depends(get_current_username),
    reviews: ReviewService = Depends(get_review_service),
):
    """Delete the caller's review of a book."""
    isbn = require_isbn(isbn)

    reviews.delete_review(isbn, username)
    return MessageResponse(message="Review deleted successfully")
