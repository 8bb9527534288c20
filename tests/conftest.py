"""Shared pytest fixtures for hypermodel tests."""

import pytest

from hypermodel.models.link import Link, LinkRelation
from hypermodel.models.representation import RepresentationModel
from hypermodel.services.model import Model
from tests.entities import Author, Product, Staff


def author_model(name: str, number: int) -> RepresentationModel:
    return Model.builder() \
        .entity(Author(name=name)) \
        .link(Link.of(f"http://localhost/author/{number}")) \
        .link(Link.of("http://localhost/authors", LinkRelation.of("authors"))) \
        .build()


@pytest.fixture
def alan_watts() -> Author:
    return Author(name="Alan Watts", born="January 6, 1915", died="November 16, 1973")


@pytest.fixture
def john_smith() -> Author:
    return Author(name="John Smith")


@pytest.fixture
def author_models() -> list[RepresentationModel]:
    return [
        author_model("Greg L. Turnquist", 1),
        author_model("Craig Walls", 2),
        author_model("Oliver Drotbohm", 3),
    ]


@pytest.fixture
def staff() -> list[Staff]:
    return [
        Staff(name="Frodo Baggins", role="ring bearer"),
        Staff(name="Bilbo Baggins", role="burglar"),
    ]


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(name="ring of power", price=999.99),
        Product(name="Saruman's staff", price=9.99),
    ]


@pytest.fixture
def book_model(alan_watts, john_smith) -> RepresentationModel:
    """A book embedding its author and illustrator under two relations."""
    return Model.hal() \
        .embed(LinkRelation.of("author"), Model.builder()
               .entity(alan_watts)
               .link(Link.of("/people/alan-watts"))
               .build()) \
        .embed(LinkRelation.of("illustrator"), Model.builder()
               .entity(john_smith)
               .link(Link.of("/people/john-smith"))
               .build()) \
        .link(Link.of("/books/the-way-of-zen")) \
        .link(Link.of("/people/alan-watts", LinkRelation.of("author"))) \
        .link(Link.of("/people/john-smith", LinkRelation.of("illustrator"))) \
        .build()
