"""
Product domain entities.

A product is what the storefront page is about; purchasables are the
buyable variants of it (license tiers, renewals).
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from core.domain.value_objects import Money, ProductSlug

PRODUCT_IMAGE_COLLECTION = "product-image"


@dataclass(frozen=True)
class Purchasable:
    """
    A specific buyable variant of a product.

    Unreleased purchasables are never offered for sale, and renewal
    purchasables only extend an existing license.
    """

    id: uuid.UUID
    product_id: uuid.UUID
    title: str
    price: Money
    released: bool
    is_renewal: bool
    sort_order: int
    created_at: datetime
    getting_started_url: Optional[str] = None
    getting_started_description: Optional[str] = None
    checkout_product_id: Optional[str] = None

    def __post_init__(self):
        """Validate purchasable entity."""
        if not self.product_id:
            raise ValueError("Product ID is required")
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Purchasable title cannot be empty")

    @property
    def is_listable(self) -> bool:
        """Whether this variant may appear in the buy listing."""
        return self.released and not self.is_renewal


@dataclass(frozen=True)
class ProductMedia:
    """An image or other asset attached to a product."""

    collection: str
    url: str
    alt: str = ""


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Immutable within a request. Purchasables and media are kept in
    display order.
    """

    id: uuid.UUID
    slug: ProductSlug
    title: str
    description: str
    long_description: str
    created_at: datetime
    action_url: Optional[str] = None
    action_label: Optional[str] = None
    url: Optional[str] = None
    purchasables: Tuple[Purchasable, ...] = field(default_factory=tuple)
    media: Tuple[ProductMedia, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate product entity."""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Product title cannot be empty")
        if len(self.title) > 255:
            raise ValueError("Product title too long")

    @property
    def listable_purchasables(self) -> Tuple[Purchasable, ...]:
        """Released, non-renewal purchasables in display order."""
        return tuple(p for p in self.purchasables if p.is_listable)

    def first_media(self, collection: str = PRODUCT_IMAGE_COLLECTION) -> Optional[ProductMedia]:
        """Return the first media item of a collection, if any."""
        for item in self.media:
            if item.collection == collection:
                return item
        return None
