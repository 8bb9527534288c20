"""In-memory catalog backing the demo API."""

from typing import Dict

from hypermodel.models.catalog import Author, Book, ZoomProduct

AUTHORS: Dict[str, Author] = {
    "alan-watts": Author(name="Alan Watts", born="January 6, 1915", died="November 16, 1973"),
    "john-smith": Author(name="John Smith"),
    "greg-turnquist": Author(name="Greg L. Turnquist"),
    "craig-walls": Author(name="Craig Walls"),
    "oliver-drotbohm": Author(name="Oliver Drotbohm"),
}

BOOKS: Dict[str, Book] = {
    "the-way-of-zen": Book(
        title="The Way of Zen",
        author_slug="alan-watts",
        illustrator_slug="john-smith",
    ),
}

PRODUCTS: Dict[int, ZoomProduct] = {
    111: ZoomProduct(some_product_property="someValue", favorite=False, purchased=True),
    222: ZoomProduct(some_product_property="someValue", favorite=False, purchased=True),
    333: ZoomProduct(some_product_property="someValue", favorite=False, purchased=True),
    444: ZoomProduct(some_product_property="someValue", favorite=False, purchased=True),
    555: ZoomProduct(some_product_property="someValue", favorite=False, purchased=True),
    666: ZoomProduct(some_product_property="someValue", favorite=False, purchased=True),
    777: ZoomProduct(some_product_property="someValue", favorite=True, purchased=False),
    998: ZoomProduct(some_product_property="someValue", favorite=True, purchased=True),
}
