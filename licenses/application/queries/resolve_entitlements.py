"""
ResolveEntitlementsQuery.

Query to find what a viewer owns for one product.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class ResolveEntitlementsQuery:
    """
    Query to resolve a viewer's entitlements on a product.

    Note: viewer_id is None for anonymous visitors.
    """

    viewer_id: Optional[int]
    product_id: uuid.UUID
