"""
Catalog DTOs for page rendering.
"""
from dataclasses import dataclass
from typing import Tuple

from products.domain.product import Product, Purchasable


@dataclass(frozen=True)
class ProductCatalogDTO:
    """A product together with the purchasables offered for sale."""

    product: Product
    purchasables: Tuple[Purchasable, ...]

    @property
    def has_purchasables(self) -> bool:
        return bool(self.purchasables)
