"""
GraphQL Book Type

Defines the Book type, the paged listing result and the mutation inputs.
"""

from datetime import datetime

import strawberry

from bookstore.graphql.types.author import AuthorInput, AuthorType
from bookstore.graphql.types.review import ReviewType


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    average_review is derived from the reviews when the type is built.
    """

    id: str
    title: str
    image_url: str | None = None
    description: str | None = None
    published_date: datetime | None = None
    publisher: str | None = None
    length: int = 0
    average_review: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    authors: list[AuthorType] = strawberry.field(default_factory=list)
    reviews: list[ReviewType] = strawberry.field(default_factory=list)


@strawberry.type
class PagedBooksResult:
    """
    One page of books with pagination metadata.
    """

    books: list[BookType]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@strawberry.input
class AddBookInput:
    """
    Input type for creating a book.

    Required values (title, positive length, at least one author) are
    checked by the resolver so clients get a descriptive error.
    """

    title: str | None = None
    image_url: str | None = None
    description: str | None = None
    published_date: datetime | None = None
    publisher: str | None = None
    length: int | None = None
    authors: list[AuthorInput] | None = None


@strawberry.input
class UpdateBookInput:
    """
    Input type for updating a book.

    Every field is written: omitted optional fields are cleared and the
    author list is replaced. Reviews are never touched.
    """

    id: str
    title: str | None = None
    image_url: str | None = None
    description: str | None = None
    published_date: datetime | None = None
    publisher: str | None = None
    length: int | None = None
    authors: list[AuthorInput] | None = None
