from __future__ import annotations

import logging
from typing import Any, Iterable, List

from hypermodel.models.link import Link
from hypermodel.models.representation import ModelKind, RepresentationModel

logger = logging.getLogger(__name__)


class ModelBuilder:
    """
    Accumulates entities and links, then freezes them with build().

    The builder stays live after build(): further calls keep accumulating
    and the next build() reflects everything added so far. Each build()
    copies the buffers, so a returned model is unaffected by later calls.
    Instances are not synchronized; share one builder across threads only
    with external locking.
    """

    def __init__(self) -> None:
        self._entities: List[Any] = []
        self._links: List[Link] = []
        self._as_collection = False

    def entity(self, value: Any) -> "ModelBuilder":
        self._entities.append(_resolve(value))
        return self

    def entities(self, values: Iterable[Any]) -> "ModelBuilder":
        """Add values and force a collection model, even for zero or one item."""
        self._entities.extend(_resolve(value) for value in values)
        self._as_collection = True
        return self

    def link(self, link: Link) -> "ModelBuilder":
        self._links.append(link)
        return self

    def links(self, links: Iterable[Link]) -> "ModelBuilder":
        self._links.extend(links)
        return self

    def build(self) -> RepresentationModel:
        links = tuple(self._links)

        if self._as_collection or len(self._entities) > 1:
            model = RepresentationModel(
                kind=ModelKind.COLLECTION,
                content=tuple(self._entities),
                links=links,
            )
        elif self._entities:
            model = RepresentationModel(
                kind=ModelKind.ENTITY,
                content=self._entities[0],
                links=links,
            )
        else:
            model = RepresentationModel(kind=ModelKind.EMPTY, links=links)

        logger.debug("Built %s model with %d link(s)", model.kind.value, len(links))
        return model


def _resolve(value: Any) -> Any:
    # Builders handed in as values are frozen at the moment they are added.
    if isinstance(value, ModelBuilder):
        return value.build()
    return value
