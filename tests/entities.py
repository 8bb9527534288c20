"""Entity types shared by the test suite."""

from typing import Optional

from pydantic import BaseModel, Field


class Author(BaseModel):
    name: str
    born: Optional[str] = None
    died: Optional[str] = None


class Staff(BaseModel):
    name: str
    role: str


class Product(BaseModel):
    name: str
    price: float


class ZoomProduct(BaseModel):
    some_product_property: str = Field(..., serialization_alias="someProductProperty")
    favorite: bool = Field(False, exclude=True)
    purchased: bool = Field(False, exclude=True)
