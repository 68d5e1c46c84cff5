"""
Purchase domain entity.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Purchase:
    """
    A completed checkout of one purchasable by one buyer.

    unlocks_companion_license marks purchases that also grant a license
    for a bundled companion product.
    """

    id: uuid.UUID
    purchasable_id: uuid.UUID
    user_id: int
    created_at: datetime
    unlocks_companion_license: bool = False

    def __post_init__(self):
        """Validate purchase entity."""
        if not self.purchasable_id:
            raise ValueError("Purchasable ID is required")
        if self.user_id is None:
            raise ValueError("Buyer is required")

    @classmethod
    def create(
        cls,
        purchasable_id: uuid.UUID,
        user_id: int,
        unlocks_companion_license: bool = False,
        purchase_id: Optional[uuid.UUID] = None,
    ) -> "Purchase":
        """
        Create a new Purchase entity.

        Args:
            purchasable_id: Purchasable UUID
            user_id: Buyer's user id
            unlocks_companion_license: Whether a companion license comes with it
            purchase_id: Optional UUID (generated if not provided)

        Returns:
            Purchase entity instance
        """
        return cls(
            id=purchase_id or uuid.uuid4(),
            purchasable_id=purchasable_id,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            unlocks_companion_license=unlocks_companion_license,
        )

    def belongs_to(self, user_id: Optional[int]) -> bool:
        return user_id is not None and self.user_id == user_id
