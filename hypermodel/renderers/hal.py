from __future__ import annotations

from typing import Any, Dict, List, Optional

from hypermodel.config.settings import settings
from hypermodel.models.link import Link
from hypermodel.models.representation import ModelKind, RepresentationModel
from hypermodel.renderers.base import _UNSET, MediaType, Renderer, entity_links, unwrap
from hypermodel.services.messages import DEFAULTS_ONLY, MessageResolver
from hypermodel.services.relations import NO_CURIES, CurieProvider, RelationProvider, relation_for

_OPTIONAL_ATTRIBUTES = ("name", "type", "hreflang", "profile", "deprecation")


class HalRenderer(Renderer):
    """
    Renders application/hal+json.

    Entity fields sit at the top level, embeds under _embedded and links
    under _links, both keyed by relation in insertion order. HAL expresses
    every model shape; only entity values without a JSON field set (bare
    scalars, sequences, non-finite numbers) are refused.
    """

    media_type = MediaType.HAL

    def __init__(
        self,
        relation_provider: Optional[RelationProvider] = None,
        curie_provider: CurieProvider = NO_CURIES,
        message_resolver: MessageResolver = DEFAULTS_ONLY,
        single_links_as_array: Optional[bool] = None,
        indent: Optional[int] = _UNSET,
    ) -> None:
        super().__init__(indent)
        self.relation_provider = relation_provider
        self.curie_provider = curie_provider
        self.message_resolver = message_resolver
        if single_links_as_array is None:
            single_links_as_array = settings.HAL_SINGLE_LINKS_AS_ARRAY
        self.single_links_as_array = single_links_as_array

    def to_document(self, model: RepresentationModel) -> Dict[str, Any]:
        return self._render(model)

    def _render(self, value: Any) -> Dict[str, Any]:
        if not isinstance(value, RepresentationModel):
            return self.fields(value)

        links = entity_links(value)
        node = unwrap(value)

        document: Dict[str, Any] = {}
        embedded: Dict[str, Any] = {}

        if node.kind is ModelKind.ENTITY:
            document.update(self.fields(node.content))

        elif node.kind is ModelKind.COLLECTION:
            for item in node.content:
                key = self.curie_provider.namespaced(relation_for(item, self.relation_provider))
                embedded.setdefault(key, []).append(self._render(item))

        elif node.kind is ModelKind.CONTAINER:
            for group in node.embeds:
                rendered = [self._render(item) for item in group.values]
                key = self.curie_provider.namespaced(group.relation)
                embedded[key] = rendered if group.collection else rendered[0]

        if embedded:
            document["_embedded"] = embedded
        if links:
            document["_links"] = self._links(links)
        return document

    def _links(self, links: List[Link]) -> Dict[str, Any]:
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for link in links:
            key = self.curie_provider.namespaced(link.rel)
            grouped.setdefault(key, []).append(self._link(link))

        return {
            key: rendered if len(rendered) > 1 or self.single_links_as_array else rendered[0]
            for key, rendered in grouped.items()
        }

    def _link(self, link: Link) -> Dict[str, Any]:
        rendered: Dict[str, Any] = {"href": link.href}
        if link.templated:
            rendered["templated"] = True

        title = self.message_resolver.resolve(f"_links.{link.rel}.title", link.title)
        if title is not None:
            rendered["title"] = title

        for attribute in _OPTIONAL_ATTRIBUTES:
            value = getattr(link, attribute)
            if value is not None:
                rendered[attribute] = value
        return rendered
