"""Links and link relations: value semantics and template expansion."""

import pytest
from pydantic import ValidationError

from hypermodel.errors import ExpansionError
from hypermodel.models.link import SELF, Link, LinkRelation


# -- Link relations ------------------------------------------------------------

def test_relations_are_interned():
    assert LinkRelation.of("author") is LinkRelation.of("author")
    assert LinkRelation.of("self") is SELF


def test_relations_compare_by_value_and_case():
    assert LinkRelation(value="author") == LinkRelation.of("author")
    assert LinkRelation.of("Self") != SELF
    assert str(LinkRelation.of("favorite products")) == "favorite products"


def test_relation_of_accepts_existing_relation():
    relation = LinkRelation.of("items")
    assert LinkRelation.of(relation) is relation


def test_empty_relation_is_rejected():
    with pytest.raises(ValidationError):
        LinkRelation.of("")


# -- Links ---------------------------------------------------------------------

def test_link_defaults_to_self_relation():
    link = Link.of("/people/alan-watts")
    assert link.rel == SELF
    assert link.href == "/people/alan-watts"
    assert link.templated is False


def test_link_accepts_relation_as_string():
    assert Link.of("/authors", "authors").rel == LinkRelation.of("authors")


def test_links_are_value_objects():
    first = Link.of("/books", LinkRelation.of("books"))
    second = Link.of("/books", "books")
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_links_are_frozen():
    link = Link.of("/books")
    with pytest.raises(ValidationError):
        link.href = "/other"


def test_with_rel_keeps_href_and_template():
    link = Link.of("/products/{id}")
    renamed = link.with_rel("product")

    assert renamed.rel == LinkRelation.of("product")
    assert renamed.href == "/products/{id}"
    assert renamed.templated is True
    assert link.rel == SELF


def test_with_self_rel():
    assert Link.of("/products", "products").with_self_rel().rel == SELF


def test_with_title():
    assert Link.of("/products").with_title("Products").title == "Products"


def test_has_rel():
    link = Link.of("/authors", "authors")
    assert link.has_rel("authors")
    assert not link.has_rel("self")


def test_templated_detection():
    assert Link.of("http://x/{id}").templated is True
    assert Link.of("http://x/42").templated is False


def test_variables_in_order_of_first_appearance():
    link = Link.of("/orgs/{org}/repos/{repo}/{org}")
    assert link.variables == ["org", "repo"]


def test_templated_is_rendered_by_model_dump():
    assert Link.of("/x/{id}").model_dump()["templated"] is True


# -- Expansion -----------------------------------------------------------------

def test_expand_positional():
    expanded = Link.of("http://x/{id}").expand(42)
    assert expanded.href == "http://x/42"
    assert expanded.templated is False
    assert expanded.rel == SELF


def test_expand_by_name():
    link = Link.of("/orgs/{org}/repos/{repo}", "repo")
    expanded = link.expand(org="spring", repo="hateoas")
    assert expanded.href == "/orgs/spring/repos/hateoas"
    assert expanded.rel == LinkRelation.of("repo")


def test_expand_repeated_variable_binds_once():
    assert Link.of("/{a}/{a}").expand("x").href == "/x/x"


def test_expand_percent_encodes_values():
    assert Link.of("/search/{term}").expand("a b/c").href == "/search/a%20b%2Fc"


def test_expand_untemplated_link_without_values():
    link = Link.of("/products")
    assert link.expand() == link


@pytest.mark.parametrize("values", [(), (1, 2)])
def test_expand_wrong_arity_fails(values):
    with pytest.raises(ExpansionError) as exc_info:
        Link.of("http://x/{id}").expand(*values)
    assert exc_info.value.template == "http://x/{id}"


def test_expand_extra_value_on_untemplated_link_fails():
    with pytest.raises(ExpansionError):
        Link.of("/products").expand(1)


def test_expand_missing_name_fails():
    with pytest.raises(ExpansionError):
        Link.of("/orgs/{org}/repos/{repo}").expand(org="spring")


def test_expand_unknown_name_fails():
    with pytest.raises(ExpansionError):
        Link.of("/orgs/{org}").expand(org="spring", repo="hateoas")


def test_expand_mixed_arguments_fail():
    with pytest.raises(ExpansionError):
        Link.of("/orgs/{org}/repos/{repo}").expand("spring", repo="hateoas")


@pytest.mark.parametrize("value", [None, [1, 2], {"id": 1}])
def test_expand_non_scalar_values_fail(value):
    with pytest.raises(ExpansionError):
        Link.of("/x/{id}").expand(value)


def test_expand_operator_expressions_unsupported():
    link = Link.of("/products{?page,size}")
    assert link.templated is True
    with pytest.raises(ExpansionError):
        link.expand()
