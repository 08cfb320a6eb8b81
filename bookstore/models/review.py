"""
Review Entity

Reviews live inside the book document. Ratings follow the 1-5 convention
but are not validated here: reviews cannot be written through the API.
"""

from pydantic import BaseModel, ConfigDict, Field

from bookstore.services.ids import new_id


class Review(BaseModel):
    """A reader review embedded in a Book document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id, alias="_id")
    rating: int
    title: str | None = None
    description: str | None = None
