"""
GetProductCatalogQuery.

Query to load a product page's catalog section by slug.
"""
from dataclasses import dataclass


@dataclass
class GetProductCatalogQuery:
    """Query to load a product and the purchasables offered for it."""

    slug: str
