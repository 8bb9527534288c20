"""Relation derivation and curie collaborators.

Both are injected: the HAL builder and the HAL renderer accept any object
matching the protocol, defaulting to the implementations below.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Protocol

from hypermodel.models.link import LinkRelation
from hypermodel.models.representation import content_type

# Relation for embeds whose type cannot be derived (models without entity content).
DEFAULT_RELATION = LinkRelation.of("content")


# -----------------------------------------------------------------------------
# Relation providers
# -----------------------------------------------------------------------------
class RelationProvider(Protocol):

    def item_relation(self, entity_type: type) -> LinkRelation:
        ...

    def derive_relation(self, entity_type: type) -> LinkRelation:
        ...


def _uncapitalize(name: str) -> str:
    return name[:1].lower() + name[1:]


def pluralize(word: str) -> str:
    if re.search(r"[^aeiou]y$", word, re.IGNORECASE):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word, re.IGNORECASE):
        return word + "es"
    return word + "s"


class DefaultRelationProvider:
    """Author -> author / authors, ZoomProduct -> zoomProduct / zoomProducts."""

    def item_relation(self, entity_type: type) -> LinkRelation:
        return LinkRelation.of(_uncapitalize(entity_type.__name__))

    def derive_relation(self, entity_type: type) -> LinkRelation:
        return LinkRelation.of(pluralize(_uncapitalize(entity_type.__name__)))


DEFAULT_RELATION_PROVIDER = DefaultRelationProvider()


def relation_for(value: Any, provider: Optional[RelationProvider] = None) -> LinkRelation:
    """Collection relation an entity (or entity model) is grouped under."""
    entity_type = content_type(value)
    if entity_type is None:
        return DEFAULT_RELATION
    return (provider or DEFAULT_RELATION_PROVIDER).derive_relation(entity_type)


# -----------------------------------------------------------------------------
# Curie providers
# -----------------------------------------------------------------------------
class CurieProvider(Protocol):

    def namespaced(self, relation: LinkRelation) -> str:
        ...


class _NoCuries:

    def namespaced(self, relation: LinkRelation) -> str:
        return relation.value

    def __repr__(self) -> str:
        return "NO_CURIES"


NO_CURIES = _NoCuries()
