"""
In-memory data container.

Holds the catalog, the user directory and the session table for one
application instance. Created in create_app() and stored on
app.state, so every app (and every test) gets its own isolated state.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from fastapi import Request

from bookreviews.scripts.init_db import seed_catalog
from bookreviews.services.catalog import CatalogStore
from bookreviews.services.session import SessionStore
from bookreviews.services.users import UserDirectory

logger = logging.getLogger(__name__)


@dataclass
class Database:
    """Process-wide stores shared by all requests of one app."""

    catalog: CatalogStore | None = field(default_factory=CatalogStore)
    users: UserDirectory = field(default_factory=UserDirectory)
    sessions: SessionStore = field(default_factory=SessionStore)

    @classmethod
    def create(cls, clock: Callable[[], float] = time.time) -> "Database":
        """Build a fresh container with the seeded catalog."""
        db = cls(sessions=SessionStore(clock=clock))
        seed_catalog(db.catalog)
        return db


def get_db(request: Request) -> Database:
    """
    Dependency that provides the app's data container.

    Used with FastAPI's Depends(); tests override it or build the app
    around their own Database.
    """
    return request.app.state.db
