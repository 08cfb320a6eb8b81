"""
GraphQL Types Package

Strawberry type definitions for the catalog schema:
- BookType (GraphQL name "Book") with authors, reviews and averageReview
- AuthorType ("Author") and AuthorInput
- ReviewType ("Review")
- PagedBooksResult for paged listings
- AddBookInput / UpdateBookInput for mutations
"""

from bookstore.graphql.types.author import AuthorInput, AuthorType
from bookstore.graphql.types.book import (
    AddBookInput,
    BookType,
    PagedBooksResult,
    UpdateBookInput,
)
from bookstore.graphql.types.review import ReviewType

__all__ = [
    # Book types
    "BookType",
    "PagedBooksResult",
    "AddBookInput",
    "UpdateBookInput",
    # Author types
    "AuthorType",
    "AuthorInput",
    # Review types
    "ReviewType",
]
