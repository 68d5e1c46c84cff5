"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from core.domain.value_objects import Money, ProductSlug
from products.domain.product import Product, ProductMedia, Purchasable
from products.infrastructure.models import Product as ProductModel
from products.infrastructure.models import Purchasable as PurchasableModel
from products.ports.product_repository import ProductRepository


def purchasable_to_domain(model: PurchasableModel) -> Purchasable:
    """
    Convert Django purchasable model to domain entity.

    Shared with repositories that load purchasables through a relation.
    """
    return Purchasable(
        id=model.id,
        product_id=model.product_id,
        title=model.title,
        price=Money(model.price_in_usd_cents),
        released=model.released,
        is_renewal=model.is_renewal,
        sort_order=model.sort_order,
        created_at=model.created_at,
        getting_started_url=model.getting_started_url or None,
        getting_started_description=model.getting_started_description or None,
        checkout_product_id=model.checkout_product_id or None,
    )


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    Products are always loaded with purchasables and media prefetched,
    in the ordering declared on the models.
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django product model to domain entity.

        Args:
            model: Django Product model with prefetched relations

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            slug=ProductSlug(model.slug),
            title=model.title,
            description=model.description,
            long_description=model.long_description,
            created_at=model.created_at,
            action_url=model.action_url or None,
            action_label=model.action_label or None,
            url=model.url or None,
            purchasables=tuple(
                purchasable_to_domain(purchasable)
                for purchasable in model.purchasables.all()
            ),
            media=tuple(
                ProductMedia(collection=item.collection, url=item.url, alt=item.alt)
                for item in model.media.all()
            ),
        )

    def _queryset(self):
        return ProductModel.objects.prefetch_related("purchasables", "media")

    @sync_to_async
    def find_by_slug(self, slug: str) -> Optional[Product]:
        """
        Find a product by slug.

        Args:
            slug: Product slug

        Returns:
            Product entity or None if not found
        """
        try:
            return self._to_domain(self._queryset().get(slug=slug))
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        try:
            return self._to_domain(self._queryset().get(id=product_id))
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def list_all(self) -> List[Product]:
        """
        List all products ordered by title.

        Returns:
            List of Product entities
        """
        return [self._to_domain(model) for model in self._queryset().order_by("title")]

    @sync_to_async
    def find_purchasable(self, purchasable_id: uuid.UUID) -> Optional[Purchasable]:
        """
        Find a purchasable by ID.

        Args:
            purchasable_id: Purchasable UUID

        Returns:
            Purchasable entity or None if not found
        """
        try:
            return purchasable_to_domain(PurchasableModel.objects.get(id=purchasable_id))
        except PurchasableModel.DoesNotExist:
            return None
