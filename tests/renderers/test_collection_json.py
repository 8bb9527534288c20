"""Collection+JSON rendering and its refusal of shapes it cannot express."""

import json

import pytest

from hypermodel.errors import StructuralMismatchError
from hypermodel.models.link import Link
from hypermodel.renderers import MediaType, get_renderer, render
from hypermodel.renderers.collection_json import CollectionJsonRenderer
from hypermodel.services.model import Model
from tests.entities import Product


@pytest.fixture
def cj() -> CollectionJsonRenderer:
    return CollectionJsonRenderer()


def test_multiple_embedded_relations_are_rejected(cj, book_model):
    with pytest.raises(StructuralMismatchError) as exc_info:
        cj.to_document(book_model)

    assert exc_info.value.media_type == MediaType.COLLECTION_JSON.value
    assert "'author'" in exc_info.value.message
    assert "'illustrator'" in exc_info.value.message


def test_render_raises_instead_of_partial_output(book_model):
    with pytest.raises(StructuralMismatchError):
        render(book_model, MediaType.COLLECTION_JSON)


def test_hal_container_of_derived_relations_is_rejected(cj, staff, products):
    model = Model.hal().entities(staff + products).build()
    with pytest.raises(StructuralMismatchError):
        cj.to_document(model)


def test_nested_embedding_is_rejected(cj, book_model, alan_watts):
    model = Model.builder().entity(book_model).entity(alan_watts).build()
    with pytest.raises(StructuralMismatchError):
        cj.to_document(model)


def test_empty_model(cj):
    assert cj.to_document(Model.hal().build()) == {
        "collection": {"version": "1.0", "items": []},
    }


def test_single_entity(cj, alan_watts):
    model = Model.builder() \
        .entity(alan_watts) \
        .link(Link.of("/people/alan-watts")) \
        .link(Link(rel="books", href="/books", title="Books")) \
        .build()

    assert cj.to_document(model) == {
        "collection": {
            "version": "1.0",
            "href": "/people/alan-watts",
            "links": [{"rel": "books", "href": "/books", "prompt": "Books"}],
            "items": [
                {
                    "href": "/people/alan-watts",
                    "data": [
                        {"name": "name", "value": "Alan Watts"},
                        {"name": "born", "value": "January 6, 1915"},
                        {"name": "died", "value": "November 16, 1973"},
                    ],
                }
            ],
        }
    }


def test_collection_of_entity_models(cj, author_models):
    model = Model.builder() \
        .entities(author_models[:2]) \
        .link(Link.of("http://localhost/authors")) \
        .build()

    assert cj.to_document(model) == {
        "collection": {
            "version": "1.0",
            "href": "http://localhost/authors",
            "items": [
                {
                    "href": "http://localhost/author/1",
                    "data": [{"name": "name", "value": "Greg L. Turnquist"}],
                    "links": [{"rel": "authors", "href": "http://localhost/authors"}],
                },
                {
                    "href": "http://localhost/author/2",
                    "data": [{"name": "name", "value": "Craig Walls"}],
                    "links": [{"rel": "authors", "href": "http://localhost/authors"}],
                },
            ],
        }
    }


def test_heterogeneous_collection_keeps_each_field_set(cj, staff, products):
    model = Model.builder().entity(staff[0]).entity(products[0]).build()

    items = cj.to_document(model)["collection"]["items"]
    assert items == [
        {"data": [{"name": "name", "value": "Frodo Baggins"}, {"name": "role", "value": "ring bearer"}]},
        {"data": [{"name": "name", "value": "ring of power"}, {"name": "price", "value": 999.99}]},
    ]


def test_single_relation_container_renders_its_items(cj, products):
    model = Model.hal() \
        .embed("products", products[0]) \
        .embed("products", products[1]) \
        .link(Link.of("/products")) \
        .build()

    document = cj.to_document(model)
    assert document["collection"]["href"] == "/products"
    assert [item["data"][0]["value"] for item in document["collection"]["items"]] == [
        "ring of power",
        "Saruman's staff",
    ]


def test_render_produces_json_bytes(alan_watts):
    body = get_renderer(MediaType.COLLECTION_JSON).render(Model.of(alan_watts))
    assert json.loads(body)["collection"]["items"][0]["data"][0] == {"name": "name", "value": "Alan Watts"}


def test_non_finite_numbers_are_a_structural_mismatch(products):
    model = Model.builder().entity(products[0]).entity(Product(name="lamp", price=float("nan"))).build()
    with pytest.raises(StructuralMismatchError) as exc_info:
        render(model, MediaType.COLLECTION_JSON)
    assert exc_info.value.media_type == MediaType.COLLECTION_JSON.value
