"""
GetProductCatalogHandler.

Handler that reads a product and the variants offered for sale.
"""

import logging

from core.domain.exceptions import ProductNotFoundError
from products.application.dto.catalog_dto import ProductCatalogDTO
from products.application.queries.get_product_catalog import GetProductCatalogQuery
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class GetProductCatalogHandler:
    """Handler for GetProductCatalogQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repositories."""
        self.product_repository = product_repository

    async def handle(self, query: GetProductCatalogQuery) -> ProductCatalogDTO:
        """
        Handle get product catalog query.

        Renewal purchasables are dropped, and so is anything not
        released yet; the rest keeps the repository's display order.

        Args:
            query: GetProductCatalogQuery

        Returns:
            ProductCatalogDTO with the product and listable purchasables

        Raises:
            ProductNotFoundError: If no product has this slug
        """
        product = await self.product_repository.find_by_slug(query.slug)
        if not product:
            raise ProductNotFoundError(f"Product {query.slug} not found")

        purchasables = product.listable_purchasables
        logger.debug(
            "Catalog loaded",
            extra={
                "product_id": str(product.id),
                "purchasables_total": len(product.purchasables),
                "purchasables_listed": len(purchasables),
            },
        )
        return ProductCatalogDTO(product=product, purchasables=purchasables)
