"""
Django implementation of PurchaseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from purchases.domain.purchase import Purchase
from purchases.infrastructure.models import Purchase as PurchaseModel
from purchases.ports.purchase_repository import PurchaseRepository


class DjangoPurchaseRepository(PurchaseRepository):
    """Django ORM implementation of PurchaseRepository."""

    def _to_domain(self, model: PurchaseModel) -> Purchase:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Purchase model

        Returns:
            Purchase domain entity
        """
        return Purchase(
            id=model.id,
            purchasable_id=model.purchasable_id,
            user_id=model.user_id,
            created_at=model.created_at,
            unlocks_companion_license=model.unlocks_companion_license,
        )

    @sync_to_async
    def save(self, purchase: Purchase) -> Purchase:
        """
        Save a purchase entity.

        Purchases are immutable once recorded, so only the companion
        flag is updated on an existing row.

        Args:
            purchase: Purchase entity to save

        Returns:
            Saved purchase entity
        """
        model, created = PurchaseModel.objects.get_or_create(
            id=purchase.id,
            defaults={
                "purchasable_id": purchase.purchasable_id,
                "user_id": purchase.user_id,
                "unlocks_companion_license": purchase.unlocks_companion_license,
            },
        )
        if not created:
            model.unlocks_companion_license = purchase.unlocks_companion_license
            model.save(update_fields=["unlocks_companion_license"])
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, purchase_id: uuid.UUID) -> Optional[Purchase]:
        """
        Find a purchase by ID.

        Args:
            purchase_id: Purchase UUID

        Returns:
            Purchase entity or None if not found
        """
        try:
            return self._to_domain(PurchaseModel.objects.get(id=purchase_id))
        except PurchaseModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_user_and_product(
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
        models = PurchaseModel.objects.filter(
            user_id=user_id, purchasable__product_id=product_id
        ).order_by("-created_at", "-id")
        return [self._to_domain(model) for model in models]
