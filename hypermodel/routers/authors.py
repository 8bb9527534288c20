from fastapi import APIRouter, HTTPException, Request, Response, status

from hypermodel.models.link import Link, LinkRelation
from hypermodel.models.representation import RepresentationModel
from hypermodel.services.catalog import AUTHORS
from hypermodel.services.model import Model
from hypermodel.utils.negotiation import hypermedia_response


router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
)


def author_model(request: Request, slug: str) -> RepresentationModel:
    return Model.builder() \
        .entity(AUTHORS[slug]) \
        .link(Link.of(str(request.url_for("get_author", slug=slug)))) \
        .link(Link.of(str(request.url_for("list_authors")), LinkRelation.of("authors"))) \
        .build()


# -----------------------------------------------------------------------------
# GET Endpoints
# -----------------------------------------------------------------------------
@router.get("/", name="list_authors")
async def list_authors(request: Request) -> Response:
    """All authors as a collection of author models."""
    model = Model.builder() \
        .entities(author_model(request, slug) for slug in AUTHORS) \
        .link(Link.of(str(request.url_for("list_authors")))) \
        .build()

    return hypermedia_response(request, model)


@router.get("/{slug}", name="get_author")
async def get_author(request: Request, slug: str) -> Response:
    if slug not in AUTHORS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Author {slug} not found"
        )

    return hypermedia_response(request, author_model(request, slug))
