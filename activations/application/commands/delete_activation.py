"""
DeleteActivationCommand.

Command to remove an activation from one of the viewer's licenses.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class DeleteActivationCommand:
    """Command to delete an activation on behalf of a viewer."""

    viewer_id: Optional[int]
    license_id: uuid.UUID
    activation_id: uuid.UUID
