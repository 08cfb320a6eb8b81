"""
Input Validation

Small predicates shared by the query and mutation resolvers. Each one
checks a single rule and raises ValidationError with a client-facing
message. Resolvers run every rule before touching the database.

Rules per operation:
- book / deleteBook: book id
- addBook: title, length, authors
- updateBook: book id, title, length, authors
- pagedBooks: page, page size
"""

from collections.abc import Sequence
from typing import Any, Protocol

from bookstore.graphql.errors import ValidationError
from bookstore.services.ids import IdGenerator

MAX_PAGE_SIZE = 100


class BookFields(Protocol):
    """Fields shared by AddBookInput and UpdateBookInput."""

    title: str | None
    length: int | None
    authors: Sequence[Any] | None


def require_book_id(book_id: str | None, ids: IdGenerator) -> str:
    if book_id is None or not book_id.strip():
        raise ValidationError("Book ID is required")
    if not ids.is_valid(book_id):
        raise ValidationError(f"Invalid book ID format: '{book_id}'")
    return book_id


def require_title(title: str | None) -> None:
    if title is None or not title.strip():
        raise ValidationError("Title is required")


def require_positive_length(length: int | None) -> None:
    if length is None or length <= 0:
        raise ValidationError("Length must be greater than 0")


def require_authors(authors: Sequence[Any] | None) -> None:
    if not authors:
        raise ValidationError("At least one author is required")


def require_page(page: int) -> None:
    if page < 1:
        raise ValidationError("Page must be greater than 0")


def require_page_size(page_size: int) -> None:
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValidationError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")


def validate_book_fields(data: BookFields) -> None:
    """Run the rules every written book must satisfy."""
    require_title(data.title)
    require_positive_length(data.length)
    require_authors(data.authors)


def validate_pagination(page: int, page_size: int) -> None:
    require_page(page)
    require_page_size(page_size)
