"""
Django implementation of ActivationRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from activations.domain.activation import Activation
from activations.infrastructure.models import Activation as ActivationModel
from activations.ports.activation_repository import ActivationRepository


class DjangoActivationRepository(ActivationRepository):
    """
    Django ORM implementation of ActivationRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Scopes deletes to the owning license
    3. Implements repository interface
    """

    def _to_domain(self, model: ActivationModel) -> Activation:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Activation model

        Returns:
            Activation domain entity
        """
        return Activation(
            id=model.id,
            license_id=model.license_id,
            name=model.name,
            created_at=model.created_at,
        )

    @sync_to_async
    def save(self, activation: Activation) -> Activation:
        """
        Save an activation entity.

        Args:
            activation: Activation entity to save

        Returns:
            Saved activation entity
        """
        # pylint: disable=no-member
        model, created = ActivationModel.objects.get_or_create(
            id=activation.id,
            defaults={
                "license_id": activation.license_id,
                "name": activation.name,
            },
        )
        if not created and model.name != activation.name:
            model.name = activation.name
            model.save(update_fields=["name"])
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, activation_id: uuid.UUID) -> Optional[Activation]:
        """
        Find an activation by ID.

        Args:
            activation_id: Activation UUID

        Returns:
            Activation entity or None if not found
        """
        try:
            return self._to_domain(ActivationModel.objects.get(id=activation_id))
        except ActivationModel.DoesNotExist:
            return None

    @sync_to_async
    def find_all_by_license(self, license_id: uuid.UUID) -> List[Activation]:
        """
        Find all activations for a license, oldest first.

        Args:
            license_id: License UUID

        Returns:
            List of Activation entities
        """
        models = ActivationModel.objects.filter(license_id=license_id).order_by(
            "created_at", "id"
        )
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def delete(self, activation_id: uuid.UUID, license_id: uuid.UUID) -> bool:
        """
        Delete an activation of a license.

        The license filter makes a delete aimed at another license's
        activation a no-op.

        Args:
            activation_id: Activation UUID
            license_id: License UUID

        Returns:
            True if a row was removed
        """
        deleted, _ = ActivationModel.objects.filter(
            id=activation_id, license_id=license_id
        ).delete()
        return deleted > 0
