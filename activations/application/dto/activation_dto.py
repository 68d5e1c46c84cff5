"""
Activation DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime

from activations.domain.activation import Activation


@dataclass
class ActivationDTO:
    """DTO for one row of the activation list."""

    id: uuid.UUID
    name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, activation: Activation) -> "ActivationDTO":
        return cls(
            id=activation.id,
            name=activation.name,
            created_at=activation.created_at,
        )


@dataclass
class DeleteActivationResponseDTO:
    """DTO for delete activation response."""

    status: str = "deleted"
