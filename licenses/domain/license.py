"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.
"""
import secrets
import string
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from products.domain.product import Purchasable


def generate_license_key(prefix: str = "LS") -> str:
    """
    Generate a license key in format: PREFIX-XXXX-XXXX-XXXX-XXXX.

    Args:
        prefix: Key prefix

    Returns:
        Generated license key string
    """
    chars = string.ascii_uppercase + string.digits
    parts = ["".join(secrets.choice(chars) for _ in range(4)) for _ in range(4)]
    return f"{prefix}-{'-'.join(parts)}"


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    An entitlement granting a viewer rights to one purchasable. The
    purchasable is loaded alongside so pages can show its title and
    getting-started text.
    """

    id: uuid.UUID
    user_id: int
    purchasable_id: uuid.UUID
    key: str
    created_at: datetime
    expires_at: Optional[datetime] = None
    purchasable: Optional[Purchasable] = None

    def __post_init__(self):
        """Validate license entity."""
        if self.user_id is None:
            raise ValueError("License owner is required")
        if not self.purchasable_id:
            raise ValueError("Purchasable ID is required")
        if not self.key:
            raise ValueError("License key is required")

    @classmethod
    def create(
        cls,
        user_id: int,
        purchasable_id: uuid.UUID,
        expires_at: Optional[datetime] = None,
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new License entity with a fresh key.

        Args:
            user_id: Owner's user id
            purchasable_id: Purchasable UUID
            expires_at: Optional expiration datetime
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance
        """
        return cls(
            id=license_id or uuid.uuid4(),
            user_id=user_id,
            purchasable_id=purchasable_id,
            key=generate_license_key(),
            created_at=datetime.now(timezone.utc),
            expires_at=expires_at,
        )

    def is_owned_by(self, user_id: Optional[int]) -> bool:
        """Check whether the given viewer owns this license."""
        return user_id is not None and self.user_id == user_id

    def is_expired(self, current_time: Optional[datetime] = None) -> bool:
        """
        Check if license has expired.

        Args:
            current_time: Current time (defaults to now, UTC)

        Returns:
            True if the license has an expiry in the past
        """
        if not self.expires_at:
            return False
        return self.expires_at < (current_time or datetime.now(timezone.utc))
