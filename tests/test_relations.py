"""Relation derivation, curie pass-through and message resolution."""

import pytest

from hypermodel.models.link import Link, LinkRelation
from hypermodel.services.messages import DEFAULTS_ONLY, StaticMessageResolver
from hypermodel.services.model import Model
from hypermodel.services.relations import (
    DEFAULT_RELATION,
    DEFAULT_RELATION_PROVIDER,
    NO_CURIES,
    pluralize,
    relation_for,
)
from tests.entities import Author, Staff, ZoomProduct


@pytest.mark.parametrize(
    "word, plural",
    [
        ("author", "authors"),
        ("staff", "staffs"),
        ("category", "categories"),
        ("day", "days"),
        ("box", "boxes"),
        ("address", "addresses"),
        ("batch", "batches"),
    ],
)
def test_pluralize(word, plural):
    assert pluralize(word) == plural


def test_default_provider_uses_uncapitalized_type_name():
    assert DEFAULT_RELATION_PROVIDER.item_relation(ZoomProduct) == LinkRelation.of("zoomProduct")
    assert DEFAULT_RELATION_PROVIDER.derive_relation(ZoomProduct) == LinkRelation.of("zoomProducts")


def test_relation_for_raw_entity():
    assert relation_for(Staff(name="Sam", role="gardener")) == LinkRelation.of("staffs")


def test_relation_for_entity_model_uses_content_type():
    model = Model.of(Model.of(Author(name="Alan Watts")), Link.of("/people/alan-watts"))
    assert relation_for(model) == LinkRelation.of("authors")


def test_relation_for_untyped_model_falls_back():
    assert relation_for(Model.builder().build()) == DEFAULT_RELATION


def test_no_curies_passes_relations_through():
    assert NO_CURIES.namespaced(LinkRelation.of("favorite products")) == "favorite products"


def test_defaults_only_resolver():
    assert DEFAULTS_ONLY.resolve("_links.self.title") is None
    assert DEFAULTS_ONLY.resolve("_links.self.title", "Self") == "Self"


def test_static_resolver():
    resolver = StaticMessageResolver({"_links.author.title": "Author"})
    assert resolver.resolve("_links.author.title") == "Author"
    assert resolver.resolve("_links.books.title", "Books") == "Books"
