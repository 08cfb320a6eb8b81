"""
pytest Fixtures for BookStore API Tests

This file contains shared fixtures used across all test files.

We run every test against mongomock, an in-memory implementation of the
pymongo API:
- Fast: No MongoDB server needed
- Isolated: Each test gets a brand new client and database

The FastAPI app is exercised through TestClient with its database
dependency overridden. The client is created without a `with` block, so
the lifespan (which pings a real MongoDB) does not run.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["ENVIRONMENT"] = "development"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["MONGODB_URL"] = "mongodb://localhost:27017"
os.environ["MONGODB_DATABASE"] = "BookStoreTestDB"

from collections.abc import Generator
from datetime import UTC, datetime

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.collection import Collection

from bookstore.database import BookContext
from bookstore.dependencies import get_book_repository, get_database_context
from bookstore.main import app
from bookstore.models import Author, Book, Review
from bookstore.repositories import BookRepository


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def book_context() -> BookContext:
    """BookContext over a fresh in-memory database."""
    client = mongomock.MongoClient()
    return BookContext(client["BookStoreTestDB"], book_collection="Book")


@pytest.fixture
def book_collection(book_context: BookContext) -> Collection:
    return book_context.get_collection("Book")


@pytest.fixture
def repository(book_collection: Collection) -> BookRepository:
    return BookRepository(book_collection)


@pytest.fixture
def client(book_context: BookContext) -> Generator[TestClient, None, None]:
    """
    Create a test client backed by the in-memory database.

    Overriding get_database_context is enough: the repository and the
    readiness check both resolve through it.
    """
    app.dependency_overrides[get_database_context] = lambda: book_context

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def client_with_repository() -> Generator:
    """
    Factory for a test client whose GraphQL context uses a given repository.

    Used to inject failing or spying repositories.
    """

    def _make(repository) -> TestClient:
        app.dependency_overrides[get_book_repository] = lambda: repository
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
def make_book(title: str = "Clean Code", **overrides) -> Book:
    """Build an unsaved Book with sensible defaults."""
    data = {
        "title": title,
        "image_url": "https://example.com/clean-code.jpg",
        "description": "A handbook of agile software craftsmanship.",
        "published_date": datetime(2008, 8, 1, tzinfo=UTC),
        "publisher": "Pearson Education",
        "length": 464,
        "authors": [Author(name="Robert C. Martin")],
    }
    data.update(overrides)
    return Book(**data)


@pytest.fixture
def sample_book(repository: BookRepository) -> Book:
    """A stored book with three reviews rated 5, 4 and 4."""
    book = make_book(
        reviews=[
            Review(rating=5, title="Must read", description="Changed how I code."),
            Review(rating=4, title="Very good", description="A bit long."),
            Review(rating=4, title="Solid", description="Good examples."),
        ]
    )
    return repository.create(book)


@pytest.fixture
def multiple_books(repository: BookRepository) -> list[Book]:
    """Create 15 books for pagination testing."""
    return [
        repository.create(make_book(f"Test Book {i + 1}", length=100 + i * 10))
        for i in range(15)
    ]
