from __future__ import annotations

from typing import Any, Dict, List

from hypermodel.models.link import SELF, Link
from hypermodel.models.representation import ModelKind, RepresentationModel
from hypermodel.renderers.base import FlatFormatRenderer, MediaType, entity_links, self_href, unwrap


class CollectionJsonRenderer(FlatFormatRenderer):
    """Renders application/vnd.collection+json."""

    media_type = MediaType.COLLECTION_JSON

    def to_document(self, model: RepresentationModel) -> Dict[str, Any]:
        items = self.items_of(model)
        links = entity_links(model)
        href = self_href(links)

        collection: Dict[str, Any] = {"version": "1.0"}
        if href is not None:
            collection["href"] = href

        other = self._links(links)
        if other:
            collection["links"] = other

        if unwrap(model).kind is ModelKind.ENTITY:
            item: Dict[str, Any] = {}
            if href is not None:
                item["href"] = href
            item["data"] = self.field_pairs(self.item_content(model))
            collection["items"] = [item]
        else:
            collection["items"] = [self._item(item) for item in items]

        return {"collection": collection}

    def _item(self, item: Any) -> Dict[str, Any]:
        links = entity_links(item)
        content = self.item_content(item)

        rendered: Dict[str, Any] = {}
        href = self_href(links)
        if href is not None:
            rendered["href"] = href
        if content is not None:
            rendered["data"] = self.field_pairs(content)

        other = self._links(links)
        if other:
            rendered["links"] = other
        return rendered

    def _links(self, links: List[Link]) -> List[Dict[str, Any]]:
        rendered = []
        for link in links:
            if link.rel == SELF:
                continue
            entry: Dict[str, Any] = {"rel": link.rel.value, "href": link.href}
            if link.name is not None:
                entry["name"] = link.name
            if link.title is not None:
                entry["prompt"] = link.title
            rendered.append(entry)
        return rendered
