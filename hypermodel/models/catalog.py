from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field


# -----------------------------------------------------------------------------
# Sample catalog entities served by the demo API
# -----------------------------------------------------------------------------
class Author(BaseModel):
    name: str = Field(
        ...,
        description="Full name of the author"
    )
    born: Optional[str] = Field(
        None,
        description="Date of birth, omitted when unknown"
    )
    died: Optional[str] = Field(
        None,
        description="Date of death, omitted when unknown"
    )


class Book(BaseModel):
    title: str = Field(..., description="Book title")
    author_slug: str = Field(..., description="Slug of the author")
    illustrator_slug: Optional[str] = Field(None, description="Slug of the illustrator, if any")


class ZoomProduct(BaseModel):
    some_product_property: str = Field(
        ...,
        serialization_alias="someProductProperty",
    )
    favorite: bool = Field(False, exclude=True)
    purchased: bool = Field(False, exclude=True)
