from __future__ import annotations

from typing import Any, Dict, List, Optional

from hypermodel.models.link import Link
from hypermodel.models.representation import ModelKind, RepresentationModel
from hypermodel.renderers.base import _UNSET, FlatFormatRenderer, MediaType, entity_links, unwrap
from hypermodel.services.relations import DEFAULT_RELATION_PROVIDER, RelationProvider

# HTTP method -> UBER action
ACTIONS = {
    "GET": "read",
    "POST": "append",
    "PUT": "replace",
    "PATCH": "partial",
    "DELETE": "remove",
}


class UberRenderer(FlatFormatRenderer):
    """Renders application/vnd.amundsen-uber+json."""

    media_type = MediaType.UBER

    def __init__(
        self,
        relation_provider: Optional[RelationProvider] = None,
        indent: Optional[int] = _UNSET,
    ) -> None:
        super().__init__(indent)
        self.relation_provider = relation_provider or DEFAULT_RELATION_PROVIDER

    def to_document(self, model: RepresentationModel) -> Dict[str, Any]:
        items = self.items_of(model)
        node = unwrap(model)

        data: List[Dict[str, Any]] = [self._link(link) for link in entity_links(model)]

        if node.kind is ModelKind.ENTITY:
            data.append(self._content(node.content))
        elif node.kind is ModelKind.CONTAINER and node.embeds:
            relation = str(node.embeds[0].relation)
            data.extend(self._item(item, relation) for item in items)
        else:
            data.extend(self._item(item) for item in items)

        uber: Dict[str, Any] = {"version": "1.0"}
        if data:
            uber["data"] = data
        return {"uber": uber}

    def _item(self, item: Any, relation: Optional[str] = None) -> Dict[str, Any]:
        data = [self._link(link) for link in entity_links(item)]
        content = self.item_content(item)
        if content is not None:
            data.append(self._content(content))

        rendered: Dict[str, Any] = {}
        if relation is not None:
            rendered["name"] = relation
        rendered["data"] = data
        return rendered

    def _content(self, entity: Any) -> Dict[str, Any]:
        return {
            "name": str(self.relation_provider.item_relation(type(entity))),
            "data": self.field_pairs(entity),
        }

    def _link(self, link: Link) -> Dict[str, Any]:
        rendered: Dict[str, Any] = {
            "name": link.rel.value,
            "rel": [link.rel.value],
            "url": link.href,
        }
        if link.templated:
            rendered["templated"] = True
        if link.title is not None:
            rendered["label"] = link.title
        if link.method is not None:
            action = ACTIONS.get(link.method.upper())
            if action is not None:
                rendered["action"] = action
        return rendered
