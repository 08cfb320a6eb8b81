"""
Book Entity

The Book is the aggregate root of the catalog. One MongoDB document holds
the book, its authors and its reviews:

    {
        "_id": ObjectId("..."),
        "title": "Clean Code",
        "image_url": "...",
        "description": "...",
        "published_date": ISODate("2008-08-01"),
        "publisher": "Pearson Education",
        "length": 464,
        "authors": [{"_id": ObjectId("..."), "name": "Robert C. Martin"}],
        "reviews": [{"_id": ObjectId("..."), "rating": 5, ...}],
        "created_at": ISODate("..."),
        "updated_at": ISODate("...")
    }

Inside Python every id is a plain string; to_document() and
from_document() convert between the string ids and stored ObjectIds.
"""

from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookstore.models.author import Author
from bookstore.models.review import Review
from bookstore.services.ids import new_id
from bookstore.services.ratings import average_rating


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def _stringify_ids(value: Any) -> Any:
    """Recursively turn ObjectId values of a raw document into strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, list):
        return [_stringify_ids(item) for item in value]
    if isinstance(value, dict):
        return {key: _stringify_ids(item) for key, item in value.items()}
    return value


class Book(BaseModel):
    """
    Book aggregate.

    Fields:
    - title: Book title (non-empty when written through the API)
    - image_url: Cover image URL, optional
    - description: Summary text
    - published_date: Publication date-time
    - publisher: Publisher name
    - length: Number of pages (> 0 when written through the API)
    - authors: Ordered embedded authors
    - reviews: Ordered embedded reviews
    - created_at / updated_at: Set by the repository, never by callers

    average_review is derived from reviews on every access.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=new_id, alias="_id")
    title: str = ""
    image_url: str | None = None
    description: str | None = None
    published_date: datetime | None = None
    publisher: str | None = None
    length: int = 0
    authors: list[Author] = Field(default_factory=list)
    reviews: list[Review] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("published_date", "created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        """MongoDB hands back naive datetimes which are always UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def average_review(self) -> float | None:
        """Mean review rating rounded to one decimal, None without reviews."""
        return average_rating(review.rating for review in self.reviews)

    # -------------------------------------------------------------------------
    # Document mapping
    # -------------------------------------------------------------------------
    def to_document(self) -> dict[str, Any]:
        """Serialize to the stored MongoDB document."""
        document = self.model_dump(by_alias=True)
        document["_id"] = ObjectId(self.id)
        for key in ("authors", "reviews"):
            for item in document[key]:
                item["_id"] = ObjectId(item["_id"])
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Book":
        """Build a Book from a stored MongoDB document."""
        return cls.model_validate(_stringify_ids(document))

    def __repr__(self) -> str:
        return f"Book(id='{self.id}', title='{self.title}')"
