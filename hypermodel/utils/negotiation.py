import logging
from typing import List, Optional, Tuple

from fastapi import Request, Response, status

from hypermodel.config.settings import settings
from hypermodel.errors import UnsupportedMediaTypeError
from hypermodel.models.representation import RepresentationModel
from hypermodel.renderers import MediaType, get_renderer
from hypermodel.utils.etag import handle_conditional_request, set_etag_headers

logger = logging.getLogger(__name__)

# Ranges that mean "whatever you prefer"
_DEFAULT_RANGES = {"*/*", "application/*", "application/json"}


def _parse_accept(accept: str) -> List[Tuple[str, float]]:
    ranges = []
    for position, part in enumerate(accept.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        media_range = pieces[0].lower()
        if not media_range:
            continue

        quality = 1.0
        for param in pieces[1:]:
            key, _, value = param.partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranges.append((media_range, quality, position))

    # Highest quality first; header order breaks ties
    ranges.sort(key=lambda r: (-r[1], r[2]))
    return [(media_range, quality) for media_range, quality, _ in ranges]


def select_media_type(accept: Optional[str]) -> MediaType:
    """Pick the hypermedia format a client asked for in its Accept header."""
    default = MediaType(settings.DEFAULT_MEDIA_TYPE)
    if not accept or not accept.strip():
        return default

    for media_range, quality in _parse_accept(accept):
        if quality <= 0:
            continue
        if media_range in _DEFAULT_RANGES:
            return default
        for media_type in MediaType:
            if media_range == media_type.value:
                return media_type

    raise UnsupportedMediaTypeError(f"None of the requested media types are supported: {accept}")


def hypermedia_response(request: Request, model: RepresentationModel) -> Response:
    """Render model in the negotiated format, honoring If-None-Match."""
    media_type = select_media_type(request.headers.get("accept"))
    body = get_renderer(media_type).render(model)

    etag, not_modified = handle_conditional_request(request, body)
    if not_modified:
        response = Response(status_code=status.HTTP_304_NOT_MODIFIED)
    else:
        response = Response(content=body, media_type=media_type.value)

    set_etag_headers(response, etag)
    logger.debug("Rendered %s for %s (%d bytes)", media_type.value, request.url.path, len(body))
    return response
