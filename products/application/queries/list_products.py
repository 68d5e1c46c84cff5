"""
ListProductsQuery.

Query to list every product for the storefront index.
"""
from dataclasses import dataclass


@dataclass
class ListProductsQuery:
    """Query to list products ordered by title."""

    pass
