"""
Pytest configuration and shared fixtures.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from activations.infrastructure.models import Activation as ActivationModel
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from licenses.infrastructure.models import License as LicenseModel
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from products.infrastructure.models import Product as ProductModel
from products.infrastructure.models import ProductMedia as ProductMediaModel
from products.infrastructure.models import Purchasable as PurchasableModel
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from purchases.infrastructure.models import Purchase as PurchaseModel
from purchases.infrastructure.repositories.django_purchase_repository import (
    DjangoPurchaseRepository,
)


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def purchase_repository():
    """Fixture for PurchaseRepository."""
    return DjangoPurchaseRepository()


@pytest.fixture
def license_repository():
    """Fixture for LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def activation_repository():
    """Fixture for ActivationRepository."""
    return DjangoActivationRepository()


@pytest.fixture
def user(db, django_user_model):
    """The signed-in viewer."""
    return django_user_model.objects.create_user(
        username="buyer", email="buyer@example.com", password="secret"
    )


@pytest.fixture
def other_user(db, django_user_model):
    """A second viewer who owns nothing of user's."""
    return django_user_model.objects.create_user(
        username="stranger", email="stranger@example.com", password="secret"
    )


@pytest.fixture
def db_product(db):
    """Product saved in database, with an image."""
    product = ProductModel.objects.create(
        slug="mailcoach",
        title="Mailcoach",
        description="Self-hosted email marketing.",
        long_description="Send campaigns and automations from your own server.",
        action_url="https://mailcoach.app",
        action_label="Visit site",
    )
    ProductMediaModel.objects.create(
        product=product,
        url="https://example.com/mailcoach.png",
        alt="Mailcoach screenshot",
    )
    return product


@pytest.fixture
def released_purchasable(db_product):
    """Released, non-renewal purchasable."""
    return PurchasableModel.objects.create(
        product=db_product,
        title="Single domain",
        price_in_usd_cents=7900,
        checkout_product_id="pdl-123",
        released=True,
        getting_started_url="https://example.com/docs",
        getting_started_description="<p>Read the installation guide.</p>",
        sort_order=1,
    )


@pytest.fixture
def unreleased_purchasable(db_product):
    """Purchasable that must stay out of listings."""
    return PurchasableModel.objects.create(
        product=db_product,
        title="Unlimited domains",
        price_in_usd_cents=19900,
        released=False,
        sort_order=2,
    )


@pytest.fixture
def renewal_purchasable(db_product):
    """Released renewal purchasable."""
    return PurchasableModel.objects.create(
        product=db_product,
        title="Renewal",
        price_in_usd_cents=3900,
        released=True,
        is_renewal=True,
        sort_order=3,
    )


@pytest.fixture
def db_license(user, released_purchasable):
    """License owned by user."""
    return LicenseModel.objects.create(
        user=user,
        purchasable=released_purchasable,
        expires_at=timezone.now() + timedelta(days=365),
    )


@pytest.fixture
def other_license(other_user, released_purchasable):
    """License owned by other_user."""
    return LicenseModel.objects.create(user=other_user, purchasable=released_purchasable)


def _create_activation(license, name, created_at):
    activation = ActivationModel.objects.create(license=license, name=name)
    # auto_now_add ignores passed values; pin the time so ordering is stable.
    ActivationModel.objects.filter(id=activation.id).update(created_at=created_at)
    activation.refresh_from_db()
    return activation


@pytest.fixture
def db_activations(db_license):
    """[MacBook, Office PC] on db_license, oldest first."""
    now = timezone.now()
    return [
        _create_activation(db_license, "MacBook", now - timedelta(hours=2)),
        _create_activation(db_license, "Office PC", now - timedelta(hours=1)),
    ]


@pytest.fixture
def other_activation(other_license):
    """Activation on other_user's license."""
    return _create_activation(other_license, "Laptop", timezone.now())


@pytest.fixture
def db_purchase(user, released_purchasable):
    """Purchase of the released purchasable by user."""
    return PurchaseModel.objects.create(purchasable=released_purchasable, user=user)


@pytest.fixture
def logged_in_client(client, user):
    """Django test client signed in as user."""
    client.force_login(user)
    return client


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def logged_in_api_client(api_client, user):
    """DRF API client signed in as user."""
    api_client.force_authenticate(user=user)
    return api_client
