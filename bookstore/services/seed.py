"""
Demo Data Seeding

Populates an empty book collection with a small demonstration catalog.

seed_demo_data() is the idempotent startup step: it only inserts when
seeding is enabled, the application runs in development and the collection
has no documents. reset_demo_data() is the destructive variant used by
scripts/seed_data.py to start over from a clean catalog.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from pymongo.collection import Collection

from bookstore.config import Settings
from bookstore.models import Author, Book, Review, utcnow

logger = logging.getLogger(__name__)


DEMO_BOOKS: list[dict[str, Any]] = [
    {
        "title": "C# in depth: Fourth Edition",
        "image_url": "https://images-na.ssl-images-amazon.com/images/I/41iLDz74c-L._SX198_BO1,204,203,200_QL40_ML2_.jpg",
        "description": "C# in Depth is designed to propel existing C# developers to a higher "
                       "level of programming skill.",
        "published_date": datetime(2019, 3, 23, tzinfo=UTC),
        "publisher": "Manning",
        "length": 528,
        "authors": ["Jon Skeet"],
        "reviews": [
            (3, "Disappointed", "Receiving the book in this condition was not fun."),
            (5, "Really in depth", "New project in C#."),
            (3, "Paper is thin, and of poor quality", "The writing is excellent, the paper is not."),
            (5, "Jon Skeet never lets you down", "Great explanation of closures and async/await."),
            (5, "Great book with lots of detail.", "Not a beginners book though."),
            (5, "Excellent book", "Compares new and old features of C#."),
        ],
    },
    {
        "title": "Clean Code",
        "image_url": "https://images-na.ssl-images-amazon.com/images/I/41xShlnTZTL._SX376_BO1,204,203,200_.jpg",
        "description": "Even bad code can function. But if code isn't clean, it can bring a "
                       "development organization to its knees.",
        "published_date": datetime(2008, 8, 1, tzinfo=UTC),
        "publisher": "Pearson Education",
        "length": 464,
        "authors": ["Robert C. Martin"],
        "reviews": [
            (5, "A must have for every programmer", "Also read Code Complete."),
            (5, "An excellent book for rookie or seasoned programmers", "Excellent writing style."),
            (2, "Not meant for high school", "Most of it was beyond high school level."),
            (5, "Worth every penny", "I have improved a lot as a programmer."),
            (5, "A key essential book for software engineering", "A definitive must read."),
        ],
    },
    {
        "title": "NHibernate in action",
        "image_url": "https://images-na.ssl-images-amazon.com/images/I/412BqQW9dzL._SX198_BO1,204,203,200_QL40_ML2_.jpg",
        "description": "Shows .NET developers how to use the NHibernate Object/Relational "
                       "Mapping tool.",
        "published_date": datetime(2009, 3, 10, tzinfo=UTC),
        "publisher": "Manning",
        "length": 400,
        "authors": ["Pierre Henri Kuate", "Tobin Harris", "Christian Bauer", "Gavin King"],
        "reviews": [],
    },
    {
        "title": "Refactoring: Improving the design of existing code",
        "image_url": "https://images-na.ssl-images-amazon.com/images/I/41trAWIzKAL._SX198_BO1,204,203,200_QL40_ML2_.jpg",
        "description": "Refactoring is about improving the design of existing code without "
                       "altering its external behavior.",
        "published_date": datetime(1999, 6, 28, tzinfo=UTC),
        "publisher": "Addison-Wesley",
        "length": 431,
        "authors": ["Paul Becker", "Martin Fowler"],
        "reviews": [],
    },
    {
        "title": "Domain-Driven Design: Tackling Complexity in the Heart of Software",
        "image_url": "https://m.media-amazon.com/images/I/51nQaF77Y4L._AC_UY218_.jpg",
        "description": "A systematic approach to domain-driven design.",
        "published_date": datetime(2003, 8, 20, tzinfo=UTC),
        "publisher": "Addison-Wesley Professional",
        "length": 560,
        "authors": ["Eric Evans"],
        "reviews": [],
    },
    {
        "title": "Design Patterns: Elements of Reusable Object-Oriented Software",
        "image_url": "https://m.media-amazon.com/images/I/81gtKoapHFL._AC_UY218_.jpg",
        "description": "Covers the design of object-oriented software and the patterns "
                       "that recur in it.",
        "published_date": datetime(1994, 10, 31, tzinfo=UTC),
        "publisher": "Addison-Wesley Professional",
        "length": 416,
        "authors": ["Erich Gamma", "Richard Helm", "Ralph Johnson", "John Vlissides"],
        "reviews": [],
    },
    {
        "title": "Test Driven Development: By Example",
        "image_url": "https://m.media-amazon.com/images/I/41pO5GqNtzL._AC_UY218_.jpg",
        "description": "Follows two TDD projects from start to finish.",
        "published_date": datetime(2002, 11, 8, tzinfo=UTC),
        "publisher": "Addison-Wesley Professional",
        "length": 240,
        "authors": ["Kent Beck"],
        "reviews": [],
    },
]


def build_demo_books() -> list[Book]:
    """Create fresh Book entities (new ids, current timestamps) for the demo catalog."""
    now = utcnow()
    books = []
    for data in DEMO_BOOKS:
        books.append(
            Book(
                title=data["title"],
                image_url=data["image_url"],
                description=data["description"],
                published_date=data["published_date"],
                publisher=data["publisher"],
                length=data["length"],
                authors=[Author(name=name) for name in data["authors"]],
                reviews=[
                    Review(rating=rating, title=title, description=description)
                    for rating, title, description in data["reviews"]
                ],
                created_at=now,
                updated_at=now,
            )
        )
    return books


def insert_demo_books(collection: Collection) -> int:
    """Insert the demo catalog and return the number of books written."""
    books = build_demo_books()
    collection.insert_many([book.to_document() for book in books])
    return len(books)


def seed_demo_data(collection: Collection, settings: Settings) -> int:
    """
    Seed the demo catalog once.

    Args:
        collection: The book collection
        settings: Application settings (seed flag and environment)

    Returns:
        Number of books inserted (0 when skipped)
    """
    if not settings.seed_demo_data:
        logger.debug("Demo data seeding disabled")
        return 0

    if not settings.is_development:
        logger.info(f"Skipping demo data seeding in '{settings.environment}' environment")
        return 0

    if collection.find_one({}, {"_id": 1}) is not None:
        logger.info("Book collection is not empty - skipping demo data seeding")
        return 0

    count = insert_demo_books(collection)
    logger.info(f"Seeded {count} demo books")
    return count


def reset_demo_data(collection: Collection) -> int:
    """
    Delete every book and insert the demo catalog again.

    DANGER: This deletes all data! Only meant for local development.

    Returns:
        Number of books inserted
    """
    deleted = collection.delete_many({}).deleted_count
    logger.warning(f"Deleted {deleted} books before reseeding")
    return insert_demo_books(collection)
