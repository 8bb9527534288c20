from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set, Union

from hypermodel.models.link import Link, LinkRelation
from hypermodel.models.representation import (
    Embedded,
    EmbeddedGroup,
    ModelKind,
    RepresentationModel,
)
from hypermodel.services.model_builder import ModelBuilder, _resolve
from hypermodel.services.relations import RelationProvider, relation_for

logger = logging.getLogger(__name__)


class HalModelBuilder(ModelBuilder):
    """
    ModelBuilder that also collects embeds and previews keyed by relation.

    A single entity, or nothing at all, builds exactly like ModelBuilder.
    Anything more yields an embedding container: entities added through
    entity() are grouped under relations derived from their type by the
    relation provider, followed by the explicit embeds in insertion order.
    """

    def __init__(self, relation_provider: Optional[RelationProvider] = None) -> None:
        super().__init__()
        self._relation_provider = relation_provider
        self._embeds: Dict[LinkRelation, List[Embedded]] = {}
        self._collections: Set[LinkRelation] = set()

    def embed(self, relation: Union[str, LinkRelation], value: Any) -> "HalModelBuilder":
        """
        Embed value under relation. Embedding the same relation again turns it
        into an ordered collection; a list or tuple embeds each element and
        always renders as a collection, even when empty.
        """
        return self._add(LinkRelation.of(relation), value, Embedded.full)

    def preview_for(self, relation: Union[str, LinkRelation], value: Any) -> "HalModelBuilder":
        """Embed value under relation as a preview of the linked resource."""
        return self._add(LinkRelation.of(relation), value, Embedded.preview)

    def preview(self, value: Any) -> "PreviewBuilder":
        return PreviewBuilder(self, value)

    def _add(self, relation: LinkRelation, value: Any, tag) -> "HalModelBuilder":
        entries = self._embeds.setdefault(relation, [])
        if isinstance(value, (list, tuple)):
            entries.extend(tag(_resolve(item)) for item in value)
            self._collections.add(relation)
        else:
            entries.append(tag(_resolve(value)))
        return self

    def build(self) -> RepresentationModel:
        if not self._embeds and not self._as_collection and len(self._entities) <= 1:
            return super().build()

        groups: Dict[LinkRelation, List[Embedded]] = {}
        collections: Set[LinkRelation] = set(self._collections)

        for entity in self._entities:
            relation = relation_for(entity, self._relation_provider)
            groups.setdefault(relation, []).append(Embedded.full(entity))
            collections.add(relation)

        for relation, entries in self._embeds.items():
            groups.setdefault(relation, []).extend(entries)

        embeds = tuple(
            EmbeddedGroup(
                relation=relation,
                items=tuple(entries),
                collection=relation in collections or len(entries) > 1,
            )
            for relation, entries in groups.items()
        )

        model = RepresentationModel(
            kind=ModelKind.CONTAINER,
            links=tuple(self._links),
            embeds=embeds,
        )
        logger.debug(
            "Built container model with %d embedded relation(s): %s",
            len(embeds),
            ", ".join(str(group.relation) for group in embeds),
        )
        return model


class PreviewBuilder:
    """Pending preview that lands under the relation of the link it is for."""

    def __init__(self, builder: HalModelBuilder, value: Any) -> None:
        self._builder = builder
        self._value = value

    def for_link(self, link: Link) -> HalModelBuilder:
        return self._builder.preview_for(link.rel, self._value).link(link)
