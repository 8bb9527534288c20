from fastapi import APIRouter, HTTPException, Request, Response, status

from hypermodel.models.link import SELF, Link, LinkRelation
from hypermodel.models.representation import RepresentationModel
from hypermodel.services.catalog import PRODUCTS
from hypermodel.services.model import Model
from hypermodel.utils.negotiation import hypermedia_response


router = APIRouter(
    prefix="/products",
    tags=["Products"],
)

FAVORITE_PRODUCTS = LinkRelation.of("favorite products")
PURCHASED_PRODUCTS = LinkRelation.of("purchased products")


def product_template(request: Request) -> Link:
    return Link.of(str(request.url_for("list_products")).rstrip("/") + "/{id}")


def product_model(request: Request, product_id: int) -> RepresentationModel:
    return Model.of(PRODUCTS[product_id], product_template(request).expand(product_id))


# -----------------------------------------------------------------------------
# GET Endpoints
# -----------------------------------------------------------------------------
@router.get("/", name="list_products")
async def list_products(request: Request) -> Response:
    """
    Products zoomed into favorite and purchased relations. A product that is
    both appears under each relation.
    """
    builder = Model.hal()
    builder.link(Link.of(str(request.url_for("list_products"))).with_self_rel())

    for product_id in sorted(PRODUCTS):
        product = PRODUCTS[product_id]
        model = product_model(request, product_id)

        if product.favorite:
            builder \
                .embed(FAVORITE_PRODUCTS, model) \
                .link(model.get_required_link(SELF).with_rel(FAVORITE_PRODUCTS))

        if product.purchased:
            builder \
                .embed(PURCHASED_PRODUCTS, model) \
                .link(model.get_required_link(SELF).with_rel(PURCHASED_PRODUCTS))

    return hypermedia_response(request, builder.build())


@router.get("/{product_id}", name="get_product")
async def get_product(request: Request, product_id: int) -> Response:
    if product_id not in PRODUCTS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product {product_id} not found"
        )

    return hypermedia_response(request, product_model(request, product_id))
