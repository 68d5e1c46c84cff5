"""
ListActivationsHandler.

Handler returning the activations of a license, oldest first.
"""
from typing import List

from activations.application.queries.list_activations import ListActivationsQuery
from activations.application.services.license_access import get_owned_license
from activations.domain.activation import Activation
from activations.ports.activation_repository import ActivationRepository
from core.metrics import activation_list_refreshes_total
from licenses.ports.license_repository import LicenseRepository


class ListActivationsHandler:
    """Handler for ListActivationsQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        activation_repository: ActivationRepository,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.activation_repository = activation_repository

    async def handle(self, query: ListActivationsQuery) -> List[Activation]:
        """
        Handle list activations query.

        Raises:
            LicenseNotFoundError: If the license does not exist
            LicenseAccessDeniedError: If the viewer does not own the license
        """
        await get_owned_license(self.license_repository, query.license_id, query.viewer_id)
        activation_list_refreshes_total.inc()
        return await self.activation_repository.find_all_by_license(query.license_id)
