from fastapi import APIRouter, HTTPException, Request, Response, status

from hypermodel.models.link import Link, LinkRelation
from hypermodel.routers.authors import author_model
from hypermodel.services.catalog import BOOKS
from hypermodel.services.model import Model
from hypermodel.utils.negotiation import hypermedia_response


router = APIRouter(
    prefix="/books",
    tags=["Books"],
)

AUTHOR = LinkRelation.of("author")
ILLUSTRATOR = LinkRelation.of("illustrator")


# -----------------------------------------------------------------------------
# GET Endpoints
# -----------------------------------------------------------------------------
@router.get("/{slug}", name="get_book")
async def get_book(request: Request, slug: str, preview: bool = False) -> Response:
    """
    A book with its author and illustrator embedded. With ?preview=true the
    people are embedded as previews of the linked resources instead.
    """
    book = BOOKS.get(slug)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book {slug} not found"
        )

    builder = Model.hal().link(Link.of(str(request.url_for("get_book", slug=slug))))

    people = [(AUTHOR, book.author_slug)]
    if book.illustrator_slug is not None:
        people.append((ILLUSTRATOR, book.illustrator_slug))

    for relation, person in people:
        person_model = author_model(request, person)
        person_link = person_model.get_required_link("self").with_rel(relation)

        if preview:
            builder.preview(person_model).for_link(person_link)
        else:
            builder.embed(relation, person_model).link(person_link)

    return hypermedia_response(request, builder.build())
