"""
Author Entity

Authors are embedded in their book's document. They are never shared
between books and get fresh ids whenever a book's author list is replaced.
"""

from pydantic import BaseModel, ConfigDict, Field

from bookstore.services.ids import new_id


class Author(BaseModel):
    """A book author embedded in a Book document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id, alias="_id")
    name: str = ""

    def __repr__(self) -> str:
        return f"Author(id='{self.id}', name='{self.name}')"
