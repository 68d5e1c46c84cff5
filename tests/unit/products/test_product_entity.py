"""
Unit tests for Product and Purchasable entities.
"""
import uuid
from datetime import datetime, timezone

import pytest

from core.domain.value_objects import Money, ProductSlug
from products.domain.product import PRODUCT_IMAGE_COLLECTION, Product, ProductMedia, Purchasable


def _purchasable(**overrides):
    values = {
        "id": uuid.uuid4(),
        "product_id": uuid.uuid4(),
        "title": "Single license",
        "price": Money(7900),
        "released": True,
        "is_renewal": False,
        "sort_order": 0,
        "created_at": datetime.now(timezone.utc),
    }
    values.update(overrides)
    return Purchasable(**values)


def _product(**overrides):
    values = {
        "id": uuid.uuid4(),
        "slug": ProductSlug("ray"),
        "title": "Ray",
        "description": "Debug with ease.",
        "long_description": "",
        "created_at": datetime.now(timezone.utc),
    }
    values.update(overrides)
    return Product(**values)


class TestPurchasable:
    """Tests for Purchasable entity."""

    def test_released_is_listable(self):
        assert _purchasable().is_listable

    def test_unreleased_is_not_listable(self):
        assert not _purchasable(released=False).is_listable

    def test_renewal_is_not_listable(self):
        assert not _purchasable(is_renewal=True).is_listable

    def test_title_required(self):
        with pytest.raises(ValueError, match="title cannot be empty"):
            _purchasable(title="  ")


class TestProduct:
    """Tests for Product entity."""

    def test_listable_purchasables_keep_order(self):
        first = _purchasable(title="One", sort_order=1)
        hidden = _purchasable(title="Two", released=False, sort_order=2)
        renewal = _purchasable(title="Renewal", is_renewal=True, sort_order=3)
        last = _purchasable(title="Four", sort_order=4)

        product = _product(purchasables=(first, hidden, renewal, last))

        assert product.listable_purchasables == (first, last)

    def test_first_media_of_collection(self):
        screenshot = ProductMedia(collection="screenshots", url="https://example.com/s.png")
        image = ProductMedia(collection=PRODUCT_IMAGE_COLLECTION, url="https://example.com/i.png")
        product = _product(media=(screenshot, image))

        assert product.first_media() == image
        assert product.first_media("screenshots") == screenshot
        assert product.first_media("videos") is None

    def test_title_required(self):
        with pytest.raises(ValueError, match="title cannot be empty"):
            _product(title="")
