"""
GraphQL Errors

Exceptions raised by resolvers. Strawberry reports them in the response's
"errors" list using the exception message; graphql-core copies the
`extensions` attribute into the error entry so clients can branch on
extensions.code instead of parsing messages.
"""

from bson.errors import BSONError
from pydantic import ValidationError as DocumentValidationError
from pymongo.errors import PyMongoError

# Unexpected storage failures that resolvers wrap into PersistenceError.
# DocumentValidationError covers stored documents that no longer map to a Book.
STORAGE_ERRORS = (PyMongoError, BSONError, DocumentValidationError)


class BookStoreError(Exception):
    """Base class for errors reported to GraphQL clients."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code}


class ValidationError(BookStoreError):
    """Raised when input validation fails."""

    code = "BAD_USER_INPUT"


class NotFoundError(BookStoreError):
    """Raised when a requested book does not exist."""

    code = "NOT_FOUND"


class PersistenceError(BookStoreError):
    """Raised when the database fails or refuses a write."""

    code = "PERSISTENCE_ERROR"


class UpdateFailedError(PersistenceError):
    """Raised when an update matched no document."""

    pass


class DeleteFailedError(PersistenceError):
    """Raised when a delete removed no document."""

    pass
