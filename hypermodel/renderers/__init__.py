from typing import Dict, Type, Union

from hypermodel.errors import UnsupportedMediaTypeError
from hypermodel.models.representation import RepresentationModel
from hypermodel.renderers.base import MediaType, Renderer
from hypermodel.renderers.collection_json import CollectionJsonRenderer
from hypermodel.renderers.hal import HalRenderer
from hypermodel.renderers.uber import UberRenderer

RENDERERS: Dict[MediaType, Type[Renderer]] = {
    MediaType.HAL: HalRenderer,
    MediaType.COLLECTION_JSON: CollectionJsonRenderer,
    MediaType.UBER: UberRenderer,
}


def get_renderer(media_type: Union[MediaType, str]) -> Renderer:
    try:
        return RENDERERS[MediaType(media_type)]()
    except ValueError:
        raise UnsupportedMediaTypeError(f"No renderer for media type '{media_type}'")


def render(model: RepresentationModel, media_type: Union[MediaType, str] = MediaType.HAL) -> bytes:
    return get_renderer(media_type).render(model)


__all__ = [
    "CollectionJsonRenderer",
    "HalRenderer",
    "MediaType",
    "Renderer",
    "UberRenderer",
    "get_renderer",
    "render",
]
