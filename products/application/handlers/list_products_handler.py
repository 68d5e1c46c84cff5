"""
ListProductsHandler.

Handler for the storefront product index.
"""

from typing import List

from products.application.queries.list_products import ListProductsQuery
from products.domain.product import Product
from products.ports.product_repository import ProductRepository


class ListProductsHandler:
    """Handler for ListProductsQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repositories."""
        self.product_repository = product_repository

    async def handle(self, query: ListProductsQuery) -> List[Product]:
        """Return all products ordered by title."""
        return await self.product_repository.list_all()
