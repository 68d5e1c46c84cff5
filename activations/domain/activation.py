"""
Activation domain entity.

This is the core domain entity representing one installed seat of a
license. It is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Activation:
    """
    Activation domain entity.

    A named machine (e.g. "MacBook") on which a license was activated.
    Activations are never edited, only created and deleted.
    """

    id: uuid.UUID
    license_id: uuid.UUID
    name: str
    created_at: datetime

    def __post_init__(self):
        """Validate activation entity."""
        if not self.license_id:
            raise ValueError("License ID is required")
        if not self.name or not self.name.strip():
            raise ValueError("Activation name cannot be empty")

    @classmethod
    def create(
        cls,
        license_id: uuid.UUID,
        name: str,
        activation_id: Optional[uuid.UUID] = None,
    ) -> "Activation":
        """
        Create a new Activation entity.

        Args:
            license_id: License UUID
            name: Display name of the activated machine
            activation_id: Optional UUID (generated if not provided)

        Returns:
            Activation entity instance
        """
        return cls(
            id=activation_id or uuid.uuid4(),
            license_id=license_id,
            name=name.strip(),
            created_at=datetime.now(timezone.utc),
        )

    def belongs_to(self, license_id: uuid.UUID) -> bool:
        """Check whether this activation hangs off the given license."""
        return self.license_id == license_id
