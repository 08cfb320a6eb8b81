"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.

Every mutation validates its whole input before the first database call,
then reports failures as BookStoreError subclasses:
- ValidationError: bad input, nothing was read or written
- NotFoundError: the referenced book does not exist
- PersistenceError and subclasses: the database failed or changed nothing
"""

import logging

import strawberry
from strawberry.types import Info

from bookstore.graphql.context import GraphQLContext
from bookstore.graphql.errors import (
    STORAGE_ERRORS,
    DeleteFailedError,
    NotFoundError,
    PersistenceError,
    UpdateFailedError,
)
from bookstore.graphql.queries import book_to_graphql
from bookstore.graphql.types.author import AuthorInput
from bookstore.graphql.types.book import AddBookInput, BookType, UpdateBookInput
from bookstore.graphql.validation import require_book_id, validate_book_fields
from bookstore.models import Author, Book
from bookstore.services.ids import IdGenerator

logger = logging.getLogger(__name__)


def build_authors(authors: list[AuthorInput], ids: IdGenerator) -> list[Author]:
    """Create author entities with freshly generated ids."""
    return [Author(id=ids.new_id(), name=a.name) for a in authors]


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    @strawberry.mutation(description="Create a new book")
    def add_book(
        self,
        info: Info[GraphQLContext, None],
        input: AddBookInput,
    ) -> BookType:
        """
        Create a new book.

        The book and each of its authors get new server-generated ids.
        """
        validate_book_fields(input)
        repository = info.context.repository
        ids = info.context.ids

        book = Book(
            id=ids.new_id(),
            title=input.title,
            image_url=input.image_url,
            description=input.description,
            published_date=input.published_date,
            publisher=input.publisher,
            length=input.length,
            authors=build_authors(input.authors, ids),
        )

        try:
            created = repository.create(book)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to create book: {exc}") from exc

        return book_to_graphql(created)

    @strawberry.mutation(description="Update an existing book")
    def update_book(
        self,
        info: Info[GraphQLContext, None],
        input: UpdateBookInput,
    ) -> BookType:
        """
        Update an existing book.

        Replaces every scalar field and the whole author list (with new
        author ids). Reviews are kept as they are.
        """
        require_book_id(input.id, info.context.ids)
        validate_book_fields(input)
        repository = info.context.repository
        ids = info.context.ids

        try:
            book = repository.get_by_id(input.id)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to update book: {exc}") from exc

        if book is None:
            raise NotFoundError(f"Book with ID '{input.id}' was not found")

        book.title = input.title
        book.image_url = input.image_url
        book.description = input.description
        book.published_date = input.published_date
        book.publisher = input.publisher
        book.length = input.length
        book.authors = build_authors(input.authors, ids)

        try:
            updated = repository.update(input.id, book)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to update book: {exc}") from exc

        if not updated:
            raise UpdateFailedError(f"Failed to update book with ID '{input.id}'")

        return book_to_graphql(book)

    @strawberry.mutation(description="Delete a book")
    def delete_book(
        self,
        info: Info[GraphQLContext, None],
        id: str,
    ) -> bool:
        """
        Delete a book.

        Returns True if deleted successfully.
        """
        require_book_id(id, info.context.ids)
        repository = info.context.repository

        try:
            book = repository.get_by_id(id)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to delete book: {exc}") from exc

        if book is None:
            raise NotFoundError(f"Book with ID '{id}' was not found")

        try:
            deleted = repository.delete(id)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to delete book: {exc}") from exc

        if not deleted:
            raise DeleteFailedError(f"Failed to delete book with ID '{id}'")

        logger.info(f"Book {id} deleted via GraphQL")
        return True
