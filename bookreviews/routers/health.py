"""
Health check endpoint.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from bookreviews import __version__
from bookreviews.database import Database, get_db

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    backend: str
    timestamp: str
    books: int
    users: int


@router.get("/health", response_model=HealthResponse)
async def health_check(db: Database = Depends(get_db)):
    """
    Health check endpoint.
    Returns server status and store sizes.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        backend="python-fastapi",
        timestamp=datetime.now(timezone.utc).isoformat(),
        books=len(db.catalog) if db.catalog is not None else 0,
        users=len(db.users),
    )
