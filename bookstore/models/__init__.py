"""
Entity Models Package

Pydantic models for the Book aggregate stored in MongoDB.

Model Relationships:
- Book -> Author: One-to-Many, embedded (authors are owned by one book)
- Book -> Review: One-to-Many, embedded (reviews are owned by one book)

Import from here:
    from bookstore.models import Author, Book, Review
"""

from bookstore.models.author import Author
from bookstore.models.book import Book, utcnow
from bookstore.models.review import Review

__all__ = [
    "Author",
    "Book",
    "Review",
    "utcnow",
]
