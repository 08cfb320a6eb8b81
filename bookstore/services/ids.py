"""
Identifier Generation

Books, authors and reviews all carry string ids that look like MongoDB
ObjectIds (24 hexadecimal characters). Id creation and format checks go
through an IdGenerator so resolvers and entities never import the driver's
id type directly.
"""

from typing import Protocol

from bson import ObjectId


class IdGenerator(Protocol):
    """Capability for creating and recognising entity identifiers."""

    def new_id(self) -> str:
        ...

    def is_valid(self, value: str) -> bool:
        ...


class ObjectIdGenerator:
    """IdGenerator producing 24-character hex ObjectId strings."""

    def new_id(self) -> str:
        return str(ObjectId())

    def is_valid(self, value: str) -> bool:
        """True for 24-character hex strings. Raw 12-byte values are rejected."""
        return isinstance(value, str) and ObjectId.is_valid(value)


default_id_generator: IdGenerator = ObjectIdGenerator()


def new_id() -> str:
    """Generate an id with the default generator."""
    return default_id_generator.new_id()
