"""
GraphQL Review Type

Reviews are read-only through the API.
"""

import strawberry


@strawberry.type(name="Review")
class ReviewType:
    """GraphQL type representing a book review."""

    id: str
    rating: int
    title: str | None = None
    description: str | None = None
