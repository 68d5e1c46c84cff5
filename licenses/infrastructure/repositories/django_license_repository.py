"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository
from products.infrastructure.repositories.django_product_repository import (
    purchasable_to_domain,
)


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    Licenses are loaded with their purchasable.
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model with purchasable selected

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            user_id=model.user_id,
            purchasable_id=model.purchasable_id,
            key=model.key,
            created_at=model.created_at,
            expires_at=model.expires_at,
            purchasable=purchasable_to_domain(model.purchasable),
        )

    @sync_to_async
    def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity
        """
        model, created = LicenseModel.objects.get_or_create(
            id=license.id,
            defaults={
                "user_id": license.user_id,
                "purchasable_id": license.purchasable_id,
                "key": license.key,
                "expires_at": license.expires_at,
            },
        )
        if not created:
            model.expires_at = license.expires_at
            model.save(update_fields=["expires_at", "updated_at"])
        return self._to_domain(LicenseModel.objects.select_related("purchasable").get(id=model.id))

    @sync_to_async
    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.select_related("purchasable").get(id=license_id)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_user_and_product(
        self, user_id: int, product_id: uuid.UUID
    ) -> List[License]:
        """
        Find a viewer's licenses for any purchasable of a product.

        Args:
            user_id: Owner's user id
            product_id: Product UUID

        Returns:
            List of License entities, newest first
        """
        models = (
            LicenseModel.objects.select_related("purchasable")
            .filter(user_id=user_id, purchasable__product_id=product_id)
            .order_by("-created_at", "-id")
        )
        return [self._to_domain(model) for model in models]
