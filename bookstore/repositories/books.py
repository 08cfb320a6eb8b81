"""
Book Repository

CRUD and paged listing over the book collection.

Every method is a direct round trip to MongoDB: no caching and no retries.
Driver errors (pymongo.errors.PyMongoError) propagate to the caller, which
turns them into API errors.
"""

import logging

from bson import ObjectId
from pymongo.collection import Collection

from bookstore.models import Book, utcnow
from bookstore.services.pagination import page_offset

logger = logging.getLogger(__name__)


class BookRepository:
    """
    Data access for Book aggregates.

    Usage:
        repository = BookRepository(context.get_collection("Book"))
        books, total = repository.get_paged(page=2, page_size=10)
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def get_all(self) -> list[Book]:
        """Return every book in storage order."""
        return [Book.from_document(doc) for doc in self.collection.find({})]

    def get_paged(self, page: int, page_size: int) -> tuple[list[Book], int]:
        """
        Return one page of books and the total number of books.

        Args:
            page: Page number (1-indexed, validated by the caller)
            page_size: Books per page (validated by the caller)

        Returns:
            Tuple of (books on the page, total count)
        """
        total_count = self.collection.count_documents({})
        cursor = (
            self.collection.find({})
            .skip(page_offset(page, page_size))
            .limit(page_size)
        )
        return [Book.from_document(doc) for doc in cursor], total_count

    def get_by_id(self, book_id: str) -> Book | None:
        """Find a book by id, None when it does not exist."""
        document = self.collection.find_one({"_id": ObjectId(book_id)})
        if document is None:
            return None
        return Book.from_document(document)

    def create(self, book: Book) -> Book:
        """
        Insert a new book.

        The id must already be set on the entity. created_at and updated_at
        are stamped here.
        """
        now = utcnow()
        book.created_at = now
        book.updated_at = now
        self.collection.insert_one(book.to_document())
        logger.info(f"Created book {book.id}")
        return book

    def update(self, book_id: str, book: Book) -> bool:
        """
        Write a book's fields over the stored document.

        All scalar fields, the author list and updated_at are replaced.
        Reviews and created_at are not written, so reviews stored
        concurrently with this update are preserved.

        Returns:
            True if a document was modified
        """
        book.updated_at = utcnow()
        document = book.to_document()
        changes = {
            key: value
            for key, value in document.items()
            if key not in ("_id", "reviews", "created_at")
        }
        result = self.collection.update_one(
            {"_id": ObjectId(book_id)},
            {"$set": changes},
        )
        if result.modified_count:
            logger.info(f"Updated book {book_id}")
        return result.modified_count > 0

    def delete(self, book_id: str) -> bool:
        """
        Delete a book.

        Returns:
            True if a document was removed
        """
        result = self.collection.delete_one({"_id": ObjectId(book_id)})
        if result.deleted_count:
            logger.info(f"Deleted book {book_id}")
        return result.deleted_count > 0
