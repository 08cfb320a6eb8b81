"""
GraphQL Author Type

Defines the Author type and its input for book mutations.
"""

import strawberry


@strawberry.type(name="Author")
class AuthorType:
    """
    GraphQL type representing a book author.

    Maps to the Author entity embedded in a book.
    """

    id: str
    name: str


@strawberry.input
class AuthorInput:
    """
    Author entry in AddBookInput / UpdateBookInput.

    Only the name is used. The server always generates a new author id.
    """

    name: str
    id: str | None = strawberry.field(
        default=None,
        description="Ignored: author ids are generated by the server",
    )
