"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver validates its arguments, reads through the repository in the
context and converts entities to GraphQL types.
"""

import strawberry
from strawberry.types import Info

from bookstore.graphql.context import GraphQLContext
from bookstore.graphql.errors import STORAGE_ERRORS, NotFoundError, PersistenceError
from bookstore.graphql.types.author import AuthorType
from bookstore.graphql.types.book import BookType, PagedBooksResult
from bookstore.graphql.types.review import ReviewType
from bookstore.graphql.validation import require_book_id, validate_pagination
from bookstore.models import Author, Book, Review
from bookstore.services.pagination import build_page_info


def author_to_graphql(author: Author) -> AuthorType:
    """Convert an Author entity to GraphQL AuthorType."""
    return AuthorType(id=author.id, name=author.name)


def review_to_graphql(review: Review) -> ReviewType:
    """Convert a Review entity to GraphQL ReviewType."""
    return ReviewType(
        id=review.id,
        rating=review.rating,
        title=review.title,
        description=review.description,
    )


def book_to_graphql(book: Book) -> BookType:
    """Convert a Book entity to GraphQL BookType."""
    return BookType(
        id=book.id,
        title=book.title,
        image_url=book.image_url,
        description=book.description,
        published_date=book.published_date,
        publisher=book.publisher,
        length=book.length,
        average_review=book.average_review,
        created_at=book.created_at,
        updated_at=book.updated_at,
        authors=[author_to_graphql(a) for a in book.authors],
        reviews=[review_to_graphql(r) for r in book.reviews],
    )


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that carries the
    GraphQLContext with the book repository.
    """

    @strawberry.field(description="Get every book")
    def books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        """Get the full, unpaged list of books."""
        repository = info.context.repository

        try:
            books = repository.get_all()
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to retrieve books: {exc}") from exc

        return [book_to_graphql(b) for b in books]

    @strawberry.field(description="Get a page of books")
    def paged_books(
        self,
        info: Info[GraphQLContext, None],
        page: int = 1,
        page_size: int = 10,
    ) -> PagedBooksResult:
        """
        Get books one page at a time.

        Args:
            page: Page number (1-indexed)
            page_size: Number of books per page (1 to 100)

        Returns:
            The page of books with pagination metadata
        """
        validate_pagination(page, page_size)
        repository = info.context.repository

        try:
            books, total_count = repository.get_paged(page, page_size)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to retrieve paged books: {exc}") from exc

        page_info = build_page_info(page, page_size, total_count)

        return PagedBooksResult(
            books=[book_to_graphql(b) for b in books],
            total_count=page_info.total_count,
            page=page_info.page,
            page_size=page_info.page_size,
            total_pages=page_info.total_pages,
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
        )

    @strawberry.field(description="Get a single book by ID")
    def book(self, info: Info[GraphQLContext, None], id: str) -> BookType | None:
        """
        Get a single book by its ID.

        A missing book is reported as a NOT_FOUND error and the field
        resolves to null, leaving sibling fields of the request intact.

        Raises:
            ValidationError: If the id is empty or malformed
            NotFoundError: If no book has this id
        """
        require_book_id(id, info.context.ids)
        repository = info.context.repository

        try:
            book = repository.get_by_id(id)
        except STORAGE_ERRORS as exc:
            raise PersistenceError(f"Failed to retrieve book: {exc}") from exc

        if book is None:
            raise NotFoundError(f"Book with ID '{id}' was not found")

        return book_to_graphql(book)
