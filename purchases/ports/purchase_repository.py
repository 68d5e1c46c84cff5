"""
Purchase repository port (interface).

This defines the contract for purchase persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import uuid

from purchases.domain.purchase import Purchase


class PurchaseRepository(ABC):
    """
    Abstract repository for Purchase entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, purchase: Purchase) -> Purchase:
        """
        Save a purchase entity.

        Args:
            purchase: Purchase entity to save

        Returns:
            Saved purchase entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, purchase_id: uuid.UUID) -> Optional[Purchase]:
        """
        Find a purchase by ID.

        Args:
            purchase_id: Purchase UUID

        Returns:
            Purchase entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_user_and_product(
        self, user_id: int, product_id: uuid.UUID
    ) -> List[Purchase]:
        """
        Find a buyer's purchases of any purchasable of a product.

        Args:
            user_id: Buyer's user id
            product_id: Product UUID

        Returns:
            List of Purchase entities, newest first
        """
        pass
