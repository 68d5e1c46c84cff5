"""
DeleteActivationHandler.

Handler for removing an activation from a license the viewer owns.
"""

import logging

from activations.application.commands.delete_activation import DeleteActivationCommand
from activations.application.services.license_access import get_owned_license
from activations.domain.activation import Activation
from activations.ports.activation_repository import ActivationRepository
from core.domain.exceptions import (
    ActivationAccessDeniedError,
    ActivationNotFoundError,
    DomainException,
)
from core.metrics import activation_deletions_total
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class DeleteActivationHandler:
    """Handler for DeleteActivationCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        activation_repository: ActivationRepository,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.activation_repository = activation_repository

    async def handle(self, command: DeleteActivationCommand) -> Activation:
        """
        Handle delete activation command.

        Args:
            command: DeleteActivationCommand

        Returns:
            The deleted Activation entity

        Raises:
            LicenseNotFoundError: If the license does not exist
            LicenseAccessDeniedError: If the viewer does not own the license
            ActivationNotFoundError: If the activation does not exist
            ActivationAccessDeniedError: If the activation is on another license
        """
        try:
            activation = await self._delete(command)
        except DomainException as e:
            activation_deletions_total.labels(outcome=e.code.lower()).inc()
            logger.warning(
                "Activation delete rejected",
                extra={
                    "code": e.code,
                    "license_id": str(command.license_id),
                    "activation_id": str(command.activation_id),
                    "viewer_id": command.viewer_id,
                },
            )
            raise

        activation_deletions_total.labels(outcome="deleted").inc()
        logger.info(
            "Activation deleted",
            extra={
                "license_id": str(command.license_id),
                "activation_id": str(activation.id),
                "activation_name": activation.name,
                "viewer_id": command.viewer_id,
            },
        )
        return activation

    async def _delete(self, command: DeleteActivationCommand) -> Activation:
        await get_owned_license(
            self.license_repository, command.license_id, command.viewer_id
        )

        activation = await self.activation_repository.find_by_id(command.activation_id)
        if not activation:
            raise ActivationNotFoundError(f"Activation {command.activation_id} not found")
        if not activation.belongs_to(command.license_id):
            raise ActivationAccessDeniedError()

        # A concurrent delete may have removed the row since the lookup.
        if not await self.activation_repository.delete(activation.id, command.license_id):
            raise ActivationNotFoundError(f"Activation {command.activation_id} not found")
        return activation
