from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hypermodel.errors import MissingLinkError
from hypermodel.models.link import Link, LinkRelation


# -----------------------------------------------------------------------------
# Embeds
# -----------------------------------------------------------------------------
class EmbedKind(str, Enum):
    FULL = "full"
    PREVIEW = "preview"


class Embedded(BaseModel):
    """A sub-resource held inline, tagged as a full embed or a preview."""

    kind: EmbedKind = Field(
        EmbedKind.FULL,
        description="Whether the value is the canonical resource or a partial preview of it"
    )
    value: Any = Field(
        ...,
        description="Raw entity or built RepresentationModel"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def full(cls, value: Any) -> "Embedded":
        return cls(kind=EmbedKind.FULL, value=value)

    @classmethod
    def preview(cls, value: Any) -> "Embedded":
        return cls(kind=EmbedKind.PREVIEW, value=value)

    @property
    def is_preview(self) -> bool:
        return self.kind is EmbedKind.PREVIEW


class EmbeddedGroup(BaseModel):
    relation: LinkRelation
    items: Tuple[Embedded, ...] = ()
    collection: bool = Field(
        False,
        description="Render as an ordered sequence even when it holds a single item"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def values(self) -> List[Any]:
        return [item.value for item in self.items]


# -----------------------------------------------------------------------------
# Representation model
# -----------------------------------------------------------------------------
class ModelKind(str, Enum):
    EMPTY = "empty"
    ENTITY = "entity"
    COLLECTION = "collection"
    CONTAINER = "container"


class RepresentationModel(BaseModel):
    """
    Frozen, format-neutral result of a builder's build().

    A node is exactly one of: empty (links only), a single entity, an
    ordered collection of entities, or an embedding container. Renderers
    decide how, or whether, each shape maps onto their wire format.
    """

    kind: ModelKind = ModelKind.EMPTY
    content: Any = None
    links: Tuple[Link, ...] = ()
    embeds: Tuple[EmbeddedGroup, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_shape(self):
        if self.embeds and self.kind is not ModelKind.CONTAINER:
            raise ValueError(f"A {self.kind.value} model cannot carry embeds")

        if self.kind in (ModelKind.EMPTY, ModelKind.CONTAINER) and self.content is not None:
            raise ValueError(f"A {self.kind.value} model cannot carry content")

        if self.kind is ModelKind.COLLECTION and not isinstance(self.content, tuple):
            raise ValueError("Collection content must be a tuple")

        relations = [group.relation for group in self.embeds]
        if len(relations) != len(set(relations)):
            raise ValueError("Embedded relations must be distinct")

        return self

    # ----------------------------
    # Shape
    # ----------------------------
    @property
    def is_empty(self) -> bool:
        return self.kind is ModelKind.EMPTY

    @property
    def is_entity(self) -> bool:
        return self.kind is ModelKind.ENTITY

    @property
    def is_collection(self) -> bool:
        return self.kind is ModelKind.COLLECTION

    @property
    def is_container(self) -> bool:
        return self.kind is ModelKind.CONTAINER

    @property
    def items(self) -> Tuple[Any, ...]:
        """Entities of a collection model; empty for every other kind."""
        if self.kind is ModelKind.COLLECTION:
            return self.content
        return ()

    @property
    def embedded(self) -> Mapping[LinkRelation, EmbeddedGroup]:
        return MappingProxyType({group.relation: group for group in self.embeds})

    # ----------------------------
    # Links
    # ----------------------------
    def get_links(self, relation: Union[str, LinkRelation]) -> List[Link]:
        relation = LinkRelation.of(relation)
        return [link for link in self.links if link.rel == relation]

    def get_link(self, relation: Union[str, LinkRelation]) -> Optional[Link]:
        links = self.get_links(relation)
        return links[0] if links else None

    def has_link(self, relation: Union[str, LinkRelation]) -> bool:
        return self.get_link(relation) is not None

    def get_required_link(self, relation: Union[str, LinkRelation]) -> Link:
        link = self.get_link(relation)
        if link is None:
            raise MissingLinkError(relation)
        return link


def content_type(value: Any) -> Optional[type]:
    """
    Type that names value when it is embedded: the entity's own type, or the
    type of a model's entity content. None for models without typed content.
    """
    while isinstance(value, RepresentationModel):
        if value.kind is not ModelKind.ENTITY:
            return None
        value = value.content
    return type(value)
