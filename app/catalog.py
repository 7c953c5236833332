"""
Static product catalog for the catalog application.

The catalog is a fixed in-memory list; there is no persistence layer.
"""

from dataclasses import asdict, dataclass
from typing import Any

PLACEHOLDER_IMAGE = "http://placehold.it/350x350"


@dataclass(frozen=True)
class Product:
    """
    Product listed in the catalog.

    Attributes:
        id: Stable identifier, also used as the listing row id.
        name: Display name.
        price: Price formatted with two decimals.
        image: Preview image URL.
    """

    id: str
    name: str
    price: str
    image: str = PLACEHOLDER_IMAGE

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the product to a dictionary representation.

        Returns:
            Dictionary containing all product fields.
        """
        return asdict(self)


PRODUCTS: tuple[Product, ...] = (
    Product(id="prod-1", name="Samsung Galaxy S6", price="420.00"),
    Product(id="prod-2", name="Samsung Galaxy S6 Edge", price="500.00"),
)


def get_products() -> list[Product]:
    """Return every product in listing order."""
    return list(PRODUCTS)


def find_product(product_id: str) -> Product | None:
    """Return the product with the given id, or None."""
    return next((product for product in PRODUCTS if product.id == product_id), None)
