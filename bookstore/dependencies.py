"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers and
into the GraphQL context getter. Tests replace them through
app.dependency_overrides, for example to run against mongomock.
"""

from typing import Annotated

from fastapi import Depends

from bookstore.database import BookContext, get_book_context
from bookstore.repositories import BookRepository
from bookstore.services.ids import IdGenerator, default_id_generator


def get_database_context() -> BookContext:
    """The shared database gateway."""
    return get_book_context()


DbContext = Annotated[BookContext, Depends(get_database_context)]


def get_book_repository(context: DbContext) -> BookRepository:
    """
    Book repository for the current request.

    The repository is a thin wrapper around the shared collection handle,
    so creating one per request is cheap.
    """
    return BookRepository(context.get_collection(context.book_collection))


def get_id_generator() -> IdGenerator:
    """Identifier generator used for new books and authors."""
    return default_id_generator


BookRepositoryDep = Annotated[BookRepository, Depends(get_book_repository)]
IdGeneratorDep = Annotated[IdGenerator, Depends(get_id_generator)]
