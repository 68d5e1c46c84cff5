"""
ListActivationsQuery.

Query to fetch the ordered activations of a viewer's license.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListActivationsQuery:
    """Query to list activations of a license the viewer owns."""

    viewer_id: Optional[int]
    license_id: uuid.UUID
