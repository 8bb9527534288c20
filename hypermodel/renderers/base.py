from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from hypermodel.config.settings import settings
from hypermodel.errors import StructuralMismatchError
from hypermodel.models.link import SELF, Link
from hypermodel.models.representation import ModelKind, RepresentationModel
from hypermodel.utils.hateoas import entity_fields, entity_to_dict

logger = logging.getLogger(__name__)


class MediaType(str, Enum):
    HAL = "application/hal+json"
    COLLECTION_JSON = "application/vnd.collection+json"
    UBER = "application/vnd.amundsen-uber+json"


_UNSET: Any = object()


class Renderer(ABC):
    """Serializes a RepresentationModel into one hypermedia format."""

    media_type: MediaType

    def __init__(self, indent: Optional[int] = _UNSET) -> None:
        self.indent = settings.RENDER_INDENT if indent is _UNSET else indent

    @abstractmethod
    def to_document(self, model: RepresentationModel) -> Dict[str, Any]:
        """Return the JSON-ready document, or raise StructuralMismatchError."""

    def render(self, model: RepresentationModel) -> bytes:
        document = self.to_document(model)
        try:
            text = json.dumps(document, indent=self.indent, ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            raise self.mismatch(f"Document is not valid JSON: {e}") from e
        return text.encode("utf-8")

    # ----------------------------
    # Helpers shared by renderers
    # ----------------------------
    def mismatch(self, message: str) -> StructuralMismatchError:
        logger.warning("%s rejected model: %s", self.media_type.value, message)
        return StructuralMismatchError(message, self.media_type.value)

    def fields(self, entity: Any) -> Dict[str, Any]:
        try:
            return entity_to_dict(entity)
        except ValueError as e:
            raise self.mismatch(str(e)) from e

    def field_pairs(self, entity: Any) -> List[Dict[str, Any]]:
        try:
            return entity_fields(entity)
        except ValueError as e:
            raise self.mismatch(str(e)) from e


def unwrap(value: Any) -> Any:
    """Strip entity models down to the innermost model or raw entity."""
    while (
        isinstance(value, RepresentationModel)
        and value.kind is ModelKind.ENTITY
        and isinstance(value.content, RepresentationModel)
    ):
        value = value.content
    return value


def entity_links(value: Any) -> List[Link]:
    """Links of value and of every entity model it wraps, innermost first."""
    chain: List[RepresentationModel] = []
    while isinstance(value, RepresentationModel):
        chain.append(value)
        value = value.content if value.kind is ModelKind.ENTITY else None

    links: List[Link] = []
    for model in reversed(chain):
        links.extend(model.links)
    return links


def self_href(links: List[Link]) -> Optional[str]:
    for link in links:
        if link.rel == SELF:
            return link.href
    return None


class FlatFormatRenderer(Renderer):
    """
    Base for formats without named embedding (Collection+JSON, UBER).

    They can express a single entity, a flat list of items, or a container
    holding exactly one relation. Anything richer is refused rather than
    flattened.
    """

    def items_of(self, model: RepresentationModel) -> List[Any]:
        model = unwrap(model)

        if model.kind is ModelKind.EMPTY:
            items: List[Any] = []
        elif model.kind is ModelKind.ENTITY:
            items = [model.content]
        elif model.kind is ModelKind.COLLECTION:
            items = list(model.content)
        else:
            if len(model.embeds) > 1:
                relations = ", ".join(f"'{group.relation}'" for group in model.embeds)
                raise self.mismatch(
                    f"Cannot express {len(model.embeds)} distinct embedded relations ({relations})"
                )
            items = model.embeds[0].values if model.embeds else []

        for item in items:
            inner = unwrap(item)
            if isinstance(inner, RepresentationModel) and inner.kind in (
                ModelKind.COLLECTION,
                ModelKind.CONTAINER,
            ):
                raise self.mismatch(f"Cannot express nested {inner.kind.value} models inside an item")

        return items

    def item_content(self, item: Any) -> Any:
        """Raw entity behind an item, or None for empty models."""
        inner = unwrap(item)
        if isinstance(inner, RepresentationModel):
            return inner.content
        return inner
