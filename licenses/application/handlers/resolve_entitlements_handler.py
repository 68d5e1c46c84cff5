"""
ResolveEntitlementsHandler.

Handler deciding whether the product page shows licenses, purchases,
or neither for the current viewer.
"""

import logging

from licenses.application.queries.resolve_entitlements import ResolveEntitlementsQuery
from licenses.domain.entitlements import Entitlements, NoEntitlements, choose_entitlements
from licenses.ports.license_repository import LicenseRepository
from purchases.ports.purchase_repository import PurchaseRepository

logger = logging.getLogger(__name__)


class ResolveEntitlementsHandler:
    """Handler for ResolveEntitlementsQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        purchase_repository: PurchaseRepository,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.purchase_repository = purchase_repository

    async def handle(self, query: ResolveEntitlementsQuery) -> Entitlements:
        """
        Handle resolve entitlements query.

        Anonymous viewers get NoEntitlements without any lookup. Purchases
        are only looked up when the viewer holds no license.

        Args:
            query: ResolveEntitlementsQuery

        Returns:
            HasLicenses, HasPurchases or NoEntitlements
        """
        if query.viewer_id is None:
            return NoEntitlements()

        licenses = await self.license_repository.find_by_user_and_product(
            query.viewer_id, query.product_id
        )
        if licenses:
            entitlements = choose_entitlements(licenses)
        else:
            purchases = await self.purchase_repository.find_by_user_and_product(
                query.viewer_id, query.product_id
            )
            entitlements = choose_entitlements(licenses, purchases)

        logger.debug(
            "Entitlements resolved",
            extra={
                "viewer_id": query.viewer_id,
                "product_id": str(query.product_id),
                "entitlement": entitlements.kind,
            },
        )
        return entitlements
