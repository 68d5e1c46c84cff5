"""
Post-checkout confirmation.

The checkout-completion handler records the sold purchasable and the
purchase in the session before redirecting to the product page. The page
takes both values out of the session once and shows a thank-you panel;
any later request finds nothing.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from core.infrastructure.transient_state import TransientSessionSlot
from core.metrics import purchase_confirmations_shown_total
from products.domain.product import Purchasable
from products.ports.product_repository import ProductRepository
from purchases.domain.purchase import Purchase
from purchases.ports.purchase_repository import PurchaseRepository

logger = logging.getLogger(__name__)

SOLD_PURCHASABLE_KEY = "sold_purchasable"
LATEST_PURCHASE_KEY = "latest_purchase"


@dataclass(frozen=True)
class PendingConfirmation:
    """Raw identifiers taken out of the session."""

    purchasable_id: str
    purchase_id: Optional[str] = None


@dataclass(frozen=True)
class PurchaseConfirmation:
    """What the thank-you panel shows."""

    purchasable: Purchasable
    purchase: Optional[Purchase] = None

    @property
    def unlocks_companion_license(self) -> bool:
        return bool(self.purchase and self.purchase.unlocks_companion_license)

    @property
    def getting_started_url(self) -> Optional[str]:
        return self.purchasable.getting_started_url


def record_sale(
    slot: TransientSessionSlot, purchasable_id: uuid.UUID, purchase_id: uuid.UUID
) -> None:
    """
    Leave the confirmation for the next page view.

    Called by the checkout-completion handler right before it redirects.
    """
    slot.put(SOLD_PURCHASABLE_KEY, str(purchasable_id))
    slot.put(LATEST_PURCHASE_KEY, str(purchase_id))


def take_pending_confirmation(slot: TransientSessionSlot) -> Optional[PendingConfirmation]:
    """
    Consume the confirmation values from the session.

    Both keys are cleared whether or not a purchasable was recorded, so a
    half-written confirmation cannot linger either.
    """
    values = slot.take(SOLD_PURCHASABLE_KEY, LATEST_PURCHASE_KEY)
    if not values[SOLD_PURCHASABLE_KEY]:
        return None
    return PendingConfirmation(
        purchasable_id=values[SOLD_PURCHASABLE_KEY],
        purchase_id=values[LATEST_PURCHASE_KEY],
    )


def _parse_uuid(value: Optional[str]) -> Optional[uuid.UUID]:
    if not value:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        logger.warning("Malformed id in checkout confirmation", extra={"value": value})
        return None


class PurchaseConfirmationService:
    """Turns consumed session values into a PurchaseConfirmation."""

    def __init__(
        self,
        product_repository: ProductRepository,
        purchase_repository: PurchaseRepository,
    ):
        """Initialize service with repositories."""
        self.product_repository = product_repository
        self.purchase_repository = purchase_repository

    async def resolve(
        self,
        pending: Optional[PendingConfirmation],
        viewer_id: Optional[int],
        product_id: Optional[uuid.UUID] = None,
    ) -> Optional[PurchaseConfirmation]:
        """
        Load the records referenced by a pending confirmation.

        Args:
            pending: Values taken from the session, or None
            viewer_id: Current viewer's user id, None when anonymous
            product_id: Product of the page being rendered; a sale of another
                product is not confirmed there

        Returns:
            PurchaseConfirmation, or None when there is nothing to show
        """
        if pending is None:
            return None

        purchasable_id = _parse_uuid(pending.purchasable_id)
        purchasable = (
            await self.product_repository.find_purchasable(purchasable_id)
            if purchasable_id
            else None
        )
        if not purchasable:
            logger.warning(
                "Checkout confirmation references a missing purchasable",
                extra={"purchasable_id": pending.purchasable_id},
            )
            return None

        if product_id is not None and purchasable.product_id != product_id:
            logger.warning(
                "Checkout confirmation is for another product",
                extra={"purchasable_id": str(purchasable.id), "product_id": str(product_id)},
            )
            return None

        purchase = None
        purchase_id = _parse_uuid(pending.purchase_id)
        if purchase_id:
            purchase = await self.purchase_repository.find_by_id(purchase_id)

        if purchase and not purchase.belongs_to(viewer_id):
            logger.warning(
                "Checkout confirmation purchase does not belong to viewer",
                extra={"purchase_id": str(purchase.id), "viewer_id": viewer_id},
            )
            return None

        confirmation = PurchaseConfirmation(purchasable=purchasable, purchase=purchase)
        purchase_confirmations_shown_total.labels(
            unlocks_companion_license=str(confirmation.unlocks_companion_license).lower()
        ).inc()
        logger.info(
            "Showing checkout confirmation",
            extra={"purchasable_id": str(purchasable.id), "viewer_id": viewer_id},
        )
        return confirmation
