"""
Database Configuration Module

This module owns the MongoDB connection for the BookStore API.

Connection Pattern
==================
MongoClient keeps its own thread-safe connection pool, so the application
creates exactly one client and shares it between all requests:

1. get_mongo_client() builds the client from settings (cached)
2. get_book_context() wraps the configured database (cached)
3. Repositories ask the context for the collection they need

The client connects lazily. initialize_database() runs once from the
application lifespan: it pings the server, creates the book indexes and
seeds demo data. Any failure there stops the application from starting.
"""

import logging
from functools import lru_cache
from typing import Any

from pymongo import ASCENDING, DESCENDING, IndexModel, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from bookstore.config import Settings, get_settings
from bookstore.services.seed import seed_demo_data

logger = logging.getLogger(__name__)


class DatabaseUnavailableError(RuntimeError):
    """Raised at startup when MongoDB cannot be reached."""

    pass


# =============================================================================
# Indexes
# =============================================================================
# Indexes matching the catalog's access patterns: lookups and sorting by
# title, publisher and publication date.

BOOK_INDEXES = [
    IndexModel([("title", ASCENDING)], name="Title_Index"),
    IndexModel([("publisher", ASCENDING)], name="Publisher_Index"),
    IndexModel([("published_date", DESCENDING)], name="PublishedDate_Index"),
    IndexModel(
        [("title", ASCENDING), ("publisher", ASCENDING)],
        name="Title_Publisher_Index",
    ),
]


# =============================================================================
# Book Context
# =============================================================================
class BookContext:
    """
    Gateway to the MongoDB database holding the catalog.

    The context only hands out collection handles, which makes one
    instance safe to share across concurrent requests.

    Usage:
        context = get_book_context()
        books = context.get_collection("Book")
    """

    def __init__(self, database: Database, book_collection: str = "Book"):
        self._database = database
        self.book_collection = book_collection

    @property
    def database(self) -> Database:
        return self._database

    def get_collection(self, name: str) -> Collection:
        """Return the named collection of the configured database."""
        return self._database.get_collection(name)

    def create_indexes(self) -> list[str]:
        """
        Create the book collection indexes.

        create_indexes is a no-op for indexes that already exist with the
        same definition, so this is safe to run on every startup.

        Returns:
            Names of the indexes
        """
        collection = self.get_collection(self.book_collection)
        names = collection.create_indexes(BOOK_INDEXES)
        logger.info(f"Ensured indexes on '{self.book_collection}': {', '.join(names)}")
        return names

    def ping(self) -> bool:
        """Check whether the MongoDB server answers."""
        try:
            self._database.command("ping")
        except PyMongoError as exc:
            logger.warning(f"MongoDB ping failed: {exc}")
            return False
        return True


# =============================================================================
# Singletons
# =============================================================================
@lru_cache
def get_mongo_client() -> MongoClient:
    """
    Create the process-wide MongoClient.

    tz_aware=True makes the driver return aware UTC datetimes.
    """
    settings = get_settings()
    return MongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
        tz_aware=True,
    )


@lru_cache
def get_book_context() -> BookContext:
    """Get the shared BookContext for the configured database."""
    settings = get_settings()
    client = get_mongo_client()
    return BookContext(
        client.get_database(settings.mongodb_database),
        book_collection=settings.book_collection,
    )


# =============================================================================
# Lifecycle
# =============================================================================
def initialize_database(
    context: BookContext,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """
    Prepare the database before the API accepts requests.

    Steps:
    1. Ping the server (fatal if unreachable)
    2. Create indexes
    3. Seed demo data (development only, empty collection only)

    Args:
        context: Database gateway to initialize
        settings: Application settings (defaults to get_settings())

    Returns:
        Summary with the index names and the number of seeded books

    Raises:
        DatabaseUnavailableError: If MongoDB does not answer the ping
    """
    settings = settings or get_settings()

    if not context.ping():
        raise DatabaseUnavailableError(
            f"MongoDB is not reachable (database '{context.database.name}')"
        )

    indexes = context.create_indexes()
    seeded = seed_demo_data(context.get_collection(context.book_collection), settings)

    return {"indexes": indexes, "seeded": seeded}


def close_database() -> None:
    """Close the shared client, if one was created."""
    if get_mongo_client.cache_info().currsize:
        get_mongo_client().close()
        get_mongo_client.cache_clear()
        get_book_context.cache_clear()
        logger.info("MongoDB connection closed")
