"""
GraphQL Query Tests

Tests for the books, pagedBooks and book queries, including validation
and error reporting.
"""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from bookstore.models import Book
from bookstore.repositories import BookRepository

# =============================================================================
# Helper Functions
# =============================================================================


def graphql_query(client: TestClient, query: str, variables: dict = None):
    """Execute a GraphQL query and return the response."""
    payload = {"query": query}
    if variables:
        payload["variables"] = variables

    response = client.post("/graphql", json=payload)
    return response.json()


def error_message(result: dict) -> str:
    assert "errors" in result, result
    return result["errors"][0]["message"]


BOOK_QUERY = """
query($id: String!) {
    book(id: $id) {
        id
        title
        imageUrl
        publisher
        length
        publishedDate
        authors { id name }
        reviews { id rating title description }
        averageReview
    }
}
"""

PAGED_QUERY = """
query($page: Int, $pageSize: Int) {
    pagedBooks(page: $page, pageSize: $pageSize) {
        books { id title }
        totalCount
        page
        pageSize
        totalPages
        hasNextPage
        hasPreviousPage
    }
}
"""


# =============================================================================
# Query Tests
# =============================================================================


class TestBooksQuery:
    """Tests for the books query."""

    def test_list_books_empty(self, client: TestClient):
        result = graphql_query(client, "query { books { id title } }")

        assert "errors" not in result
        assert result["data"]["books"] == []

    def test_list_books_with_data(self, client: TestClient, sample_book: Book):
        query = """
        query {
            books {
                id
                title
                authors { name }
                averageReview
            }
        }
        """
        result = graphql_query(client, query)

        assert "errors" not in result
        books = result["data"]["books"]
        assert len(books) == 1
        assert books[0]["id"] == sample_book.id
        assert books[0]["authors"] == [{"name": "Robert C. Martin"}]
        assert books[0]["averageReview"] == 4.3

    def test_list_books_returns_all(self, client: TestClient, multiple_books: list[Book]):
        result = graphql_query(client, "query { books { id } }")

        assert len(result["data"]["books"]) == 15

    def test_list_books_storage_failure(self, client_with_repository):
        repository = MagicMock(spec=BookRepository)
        repository.get_all.side_effect = PyMongoError("connection refused")

        result = graphql_query(client_with_repository(repository), "query { books { id } }")

        assert error_message(result) == "Failed to retrieve books: connection refused"
        assert result["errors"][0]["extensions"]["code"] == "PERSISTENCE_ERROR"

    def test_list_books_undecodable_document(self, client: TestClient, book_collection):
        book_collection.insert_one(
            {"_id": ObjectId(), "title": "Legacy", "length": None, "authors": [], "reviews": []}
        )

        result = graphql_query(client, "query { books { id title } }")

        assert error_message(result).startswith("Failed to retrieve books: ")
        assert "length" in error_message(result)
        assert result["errors"][0]["extensions"]["code"] == "PERSISTENCE_ERROR"


class TestPagedBooksQuery:
    """Tests for the pagedBooks query."""

    def test_defaults(self, client: TestClient, multiple_books: list[Book]):
        result = graphql_query(client, "query { pagedBooks { books { id } page pageSize totalPages } }")

        assert "errors" not in result
        paged = result["data"]["pagedBooks"]
        assert paged["page"] == 1
        assert paged["pageSize"] == 10
        assert paged["totalPages"] == 2
        assert len(paged["books"]) == 10

    def test_first_page(self, client: TestClient, multiple_books: list[Book]):
        result = graphql_query(client, PAGED_QUERY, {"page": 1, "pageSize": 5})

        assert "errors" not in result
        paged = result["data"]["pagedBooks"]
        assert len(paged["books"]) == 5
        assert paged["totalCount"] == 15
        assert paged["totalPages"] == 3
        assert paged["hasNextPage"] is True
        assert paged["hasPreviousPage"] is False

    def test_middle_page(self, client: TestClient, multiple_books: list[Book]):
        result = graphql_query(client, PAGED_QUERY, {"page": 2, "pageSize": 5})

        paged = result["data"]["pagedBooks"]
        assert [b["title"] for b in paged["books"]] == [f"Test Book {i}" for i in range(6, 11)]
        assert paged["hasNextPage"] is True
        assert paged["hasPreviousPage"] is True

    def test_last_partial_page(self, client: TestClient, multiple_books: list[Book]):
        result = graphql_query(client, PAGED_QUERY, {"page": 4, "pageSize": 4})

        paged = result["data"]["pagedBooks"]
        assert len(paged["books"]) == 3
        assert paged["totalPages"] == 4
        assert paged["hasNextPage"] is False
        assert paged["hasPreviousPage"] is True

    def test_empty_collection(self, client: TestClient):
        result = graphql_query(client, PAGED_QUERY, {"page": 1, "pageSize": 10})

        paged = result["data"]["pagedBooks"]
        assert paged["books"] == []
        assert paged["totalCount"] == 0
        assert paged["totalPages"] == 0
        assert paged["hasNextPage"] is False
        assert paged["hasPreviousPage"] is False

    @pytest.mark.parametrize(
        "variables, message",
        [
            ({"page": 0, "pageSize": 10}, "Page must be greater than 0"),
            ({"page": -3, "pageSize": 10}, "Page must be greater than 0"),
            ({"page": 1, "pageSize": 0}, "Page size must be between 1 and 100"),
            ({"page": 1, "pageSize": 101}, "Page size must be between 1 and 100"),
        ],
    )
    def test_invalid_pagination_skips_storage(self, client_with_repository, variables, message):
        repository = MagicMock(spec=BookRepository)

        result = graphql_query(client_with_repository(repository), PAGED_QUERY, variables)

        assert error_message(result) == message
        assert result["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
        repository.get_paged.assert_not_called()

    def test_storage_failure(self, client_with_repository):
        repository = MagicMock(spec=BookRepository)
        repository.get_paged.side_effect = PyMongoError("timed out")

        result = graphql_query(client_with_repository(repository), PAGED_QUERY, {"page": 1})

        assert error_message(result) == "Failed to retrieve paged books: timed out"


class TestBookQuery:
    """Tests for the book query."""

    def test_get_single_book(self, client: TestClient, sample_book: Book):
        result = graphql_query(client, BOOK_QUERY, {"id": sample_book.id})

        assert "errors" not in result
        book = result["data"]["book"]
        assert book["id"] == sample_book.id
        assert book["title"] == "Clean Code"
        assert book["imageUrl"] == "https://example.com/clean-code.jpg"
        assert book["length"] == 464
        assert book["publishedDate"].startswith("2008-08-01T00:00:00")
        assert book["authors"][0]["id"] == sample_book.authors[0].id
        assert [r["rating"] for r in book["reviews"]] == [5, 4, 4]
        assert book["averageReview"] == 4.3

    def test_book_without_reviews(self, client: TestClient, multiple_books: list[Book]):
        result = graphql_query(client, BOOK_QUERY, {"id": multiple_books[0].id})

        assert result["data"]["book"]["reviews"] == []
        assert result["data"]["book"]["averageReview"] is None

    def test_get_book_not_found(self, client: TestClient):
        book_id = str(ObjectId())

        result = graphql_query(client, BOOK_QUERY, {"id": book_id})

        assert error_message(result) == f"Book with ID '{book_id}' was not found"
        assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"
        assert result["data"] == {"book": None}

    def test_book_not_found_keeps_sibling_fields(self, client: TestClient, sample_book: Book):
        book_id = str(ObjectId())
        query = """
        query($id: String!) {
            book(id: $id) { id }
            books { id }
        }
        """

        result = graphql_query(client, query, {"id": book_id})

        assert error_message(result) == f"Book with ID '{book_id}' was not found"
        assert result["errors"][0]["path"] == ["book"]
        assert result["data"]["book"] is None
        assert result["data"]["books"] == [{"id": sample_book.id}]

    def test_empty_id(self, client: TestClient):
        result = graphql_query(client, BOOK_QUERY, {"id": ""})

        assert error_message(result) == "Book ID is required"

    def test_malformed_id_skips_storage(self, client_with_repository):
        repository = MagicMock(spec=BookRepository)

        result = graphql_query(client_with_repository(repository), BOOK_QUERY, {"id": "12345"})

        assert error_message(result) == "Invalid book ID format: '12345'"
        repository.get_by_id.assert_not_called()

    def test_storage_failure(self, client_with_repository):
        repository = MagicMock(spec=BookRepository)
        repository.get_by_id.side_effect = PyMongoError("node is recovering")

        result = graphql_query(
            client_with_repository(repository), BOOK_QUERY, {"id": str(ObjectId())}
        )

        assert error_message(result) == "Failed to retrieve book: node is recovering"
