"""
Public API router.
Handles user registration and catalog browsing. No authentication.
"""

import asyncio

from fastapi import APIRouter, Depends

from bookreviews.config import Settings
from bookreviews.database import Database, get_db
from bookreviews.exceptions import NotFoundError
from bookreviews.middleware.auth import get_app_settings
from bookreviews.models.book import Book
from bookreviews.schemas.auth import CredentialsRequest, MessageResponse
from bookreviews.schemas.book import BookResponse, ReviewsResponse
from bookreviews.services.catalog import CatalogService

router = APIRouter()


def get_catalog_service(db: Database = Depends(get_db)) -> CatalogService:
    return CatalogService(db.catalog)


async def simulate_latency(settings: Settings) -> None:
    """Optional artificial delay before a catalog read."""
    if settings.catalog_read_delay > 0:
        await asyncio.sleep(settings.catalog_read_delay)


def require_matches(books: list[Book]) -> list[Book]:
    """An empty search result is reported as 404."""
    if not books:
        raise NotFoundError("Book")
    return books


# ---------------------------------------------------------
# Registration
# ---------------------------------------------------------

@router.post("/register", response_model=MessageResponse)
async def register(
    data: CredentialsRequest,
    db: Database = Depends(get_db),
):
    """
    Register a new user.

    Returns 400 when a field is missing or the username is taken.
    """
    account = db.users.register(data.username, data.password)
    return MessageResponse(
        message=f"User successfully registered user {account.username}. Now you can login"
    )


# ---------------------------------------------------------
# Catalog
# ---------------------------------------------------------

@router.get("/")
@router.get("/books")
async def list_books(
    catalog: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, BookResponse]:
    """Full catalog keyed by ISBN."""
    await simulate_latency(settings)
    return {book.id: BookResponse.model_validate(book) for book in catalog.list_all()}


@router.get("/books/author/{author}", response_model=list[BookResponse])
async def get_books_by_author(
    author: str,
    catalog: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
):
    """Books by an author (exact, case-sensitive match)."""
    await simulate_latency(settings)
    return require_matches(catalog.find_by_author(author))


@router.get("/books/title/{title}", response_model=list[BookResponse])
async def get_books_by_title(
    title: str,
    catalog: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
):
    """Books with a title (exact, case-sensitive match)."""
    await simulate_latency(settings)
    return require_matches(catalog.find_by_title(title))


@router.get("/books/{isbn}", response_model=BookResponse)
async def get_book(
    isbn: str,
    catalog: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
):
    """Get one book by ISBN."""
    await simulate_latency(settings)
    return catalog.get_by_key(isbn)


@router.get("/books/{isbn}/reviews", response_model=ReviewsResponse)
async def get_book_reviews(
    isbn: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """All reviews of a book as username/review pairs."""
    return ReviewsResponse(reviews=catalog.get_reviews(isbn))
