"""
Product repository port (interface).

This defines the contract for catalog persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import uuid

from products.domain.product import Product, Purchasable


class ProductRepository(ABC):
    """
    Abstract repository for Product aggregates.

    Products are returned with their purchasables and media loaded.
    """

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Product]:
        """
        Find a product by slug.

        Args:
            slug: Product slug

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """
        List all products ordered by title.

        Returns:
            List of Product entities
        """
        pass

    @abstractmethod
    async def find_purchasable(self, purchasable_id: uuid.UUID) -> Optional[Purchasable]:
        """
        Find a purchasable by ID.

        Args:
            purchasable_id: Purchasable UUID

        Returns:
            Purchasable entity or None if not found
        """
        pass
