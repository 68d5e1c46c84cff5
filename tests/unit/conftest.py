"""
In-memory repositories for handler and component tests.

These implement the ports without touching the database, and count
lookups so tests can assert which repositories were consulted.
"""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

from activations.domain.activation import Activation
from activations.ports.activation_repository import ActivationRepository
from core.domain.value_objects import Money, ProductSlug
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository
from products.domain.product import Product, Purchasable
from products.ports.product_repository import ProductRepository
from purchases.domain.purchase import Purchase
from purchases.ports.purchase_repository import PurchaseRepository

VIEWER_ID = 1
OTHER_VIEWER_ID = 2


class InMemoryProductRepository(ProductRepository):
    def __init__(self):
        self.products: Dict[uuid.UUID, Product] = {}

    def add(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    async def find_by_slug(self, slug: str) -> Optional[Product]:
        for product in self.products.values():
            if product.slug.value == slug:
                return product
        return None

    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        return self.products.get(product_id)

    async def list_all(self) -> List[Product]:
        return sorted(self.products.values(), key=lambda p: p.title)

    async def find_purchasable(self, purchasable_id: uuid.UUID) -> Optional[Purchasable]:
        for product in self.products.values():
            for purchasable in product.purchasables:
                if purchasable.id == purchasable_id:
                    return purchasable
        return None


class InMemoryPurchaseRepository(PurchaseRepository):
    def __init__(self, product_repository: InMemoryProductRepository):
        self.purchases: Dict[uuid.UUID, Purchase] = {}
        self.product_repository = product_repository
        self.lookups = 0

    async def save(self, purchase: Purchase) -> Purchase:
        self.purchases[purchase.id] = purchase
        return purchase

    async def find_by_id(self, purchase_id: uuid.UUID) -> Optional[Purchase]:
        return self.purchases.get(purchase_id)

    async def find_by_user_and_product(
        self, user_id: int, product_id: uuid.UUID
    ) -> List[Purchase]:
        self.lookups += 1
        result = []
        for purchase in self.purchases.values():
            purchasable = await self.product_repository.find_purchasable(purchase.purchasable_id)
            if purchase.user_id == user_id and purchasable.product_id == product_id:
                result.append(purchase)
        return sorted(result, key=lambda p: p.created_at, reverse=True)


class InMemoryLicenseRepository(LicenseRepository):
    def __init__(self, product_repository: InMemoryProductRepository):
        self.licenses: Dict[uuid.UUID, License] = {}
        self.product_repository = product_repository
        self.lookups = 0

    async def save(self, license: License) -> License:
        self.licenses[license.id] = license
        return license

    async def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        return self.licenses.get(license_id)

    async def find_by_user_and_product(
        self, user_id: int, product_id: uuid.UUID
    ) -> List[License]:
        self.lookups += 1
        result = []
        for license in self.licenses.values():
            purchasable = await self.product_repository.find_purchasable(license.purchasable_id)
            if license.user_id == user_id and purchasable.product_id == product_id:
                result.append(license)
        return sorted(result, key=lambda l: l.created_at, reverse=True)


class InMemoryActivationRepository(ActivationRepository):
    def __init__(self):
        self.activations: Dict[uuid.UUID, Activation] = {}

    async def save(self, activation: Activation) -> Activation:
        self.activations[activation.id] = activation
        return activation

    async def find_by_id(self, activation_id: uuid.UUID) -> Optional[Activation]:
        return self.activations.get(activation_id)

    async def find_all_by_license(self, license_id: uuid.UUID) -> List[Activation]:
        return sorted(
            (a for a in self.activations.values() if a.license_id == license_id),
            key=lambda a: (a.created_at, str(a.id)),
        )

    async def delete(self, activation_id: uuid.UUID, license_id: uuid.UUID) -> bool:
        activation = self.activations.get(activation_id)
        if activation is None or activation.license_id != license_id:
            return False
        del self.activations[activation_id]
        return True


def make_purchasable(product_id, title, released=True, is_renewal=False, sort_order=0, **extra):
    return Purchasable(
        id=uuid.uuid4(),
        product_id=product_id,
        title=title,
        price=Money(7900),
        released=released,
        is_renewal=is_renewal,
        sort_order=sort_order,
        created_at=datetime.now(timezone.utc),
        **extra,
    )


@pytest.fixture
def viewer_id():
    return VIEWER_ID


@pytest.fixture
def other_viewer_id():
    return OTHER_VIEWER_ID


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def purchase_repo(product_repo):
    return InMemoryPurchaseRepository(product_repo)


@pytest.fixture
def license_repo(product_repo):
    return InMemoryLicenseRepository(product_repo)


@pytest.fixture
def activation_repo():
    return InMemoryActivationRepository()


@pytest.fixture
def product(product_repo):
    """Product with released, unreleased and renewal purchasables."""
    product_id = uuid.uuid4()
    return product_repo.add(
        Product(
            id=product_id,
            slug=ProductSlug("ray"),
            title="Ray",
            description="Debug with ease.",
            long_description="Ray is a desktop debugging app.",
            created_at=datetime.now(timezone.utc),
            purchasables=(
                make_purchasable(
                    product_id,
                    "Single license",
                    sort_order=1,
                    getting_started_url="https://example.com/docs",
                    getting_started_description="<p>Install Ray.</p>",
                ),
                make_purchasable(product_id, "Team license", released=False, sort_order=2),
                make_purchasable(product_id, "Renewal", is_renewal=True, sort_order=3),
            ),
        )
    )


@pytest.fixture
def license(product, license_repo):
    """License for the first purchasable, owned by VIEWER_ID."""
    purchasable = product.purchasables[0]
    entity = replace(
        License.create(user_id=VIEWER_ID, purchasable_id=purchasable.id),
        purchasable=purchasable,
    )
    license_repo.licenses[entity.id] = entity
    return entity


@pytest.fixture
def foreign_license(product, license_repo):
    """License owned by OTHER_VIEWER_ID."""
    entity = License.create(user_id=OTHER_VIEWER_ID, purchasable_id=product.purchasables[0].id)
    license_repo.licenses[entity.id] = entity
    return entity


def add_activation(activation_repo, license_id, name, minutes_ago):
    activation = Activation(
        id=uuid.uuid4(),
        license_id=license_id,
        name=name,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )
    activation_repo.activations[activation.id] = activation
    return activation


@pytest.fixture
def activations(license, activation_repo):
    """[MacBook, Office PC], oldest first."""
    return [
        add_activation(activation_repo, license.id, "MacBook", minutes_ago=20),
        add_activation(activation_repo, license.id, "Office PC", minutes_ago=10),
    ]


@pytest.fixture
def foreign_activation(foreign_license, activation_repo):
    return add_activation(activation_repo, foreign_license.id, "Laptop", minutes_ago=5)


@pytest.fixture
def make_activation(activation_repo):
    """Add an activation to the in-memory store."""

    def _make(license_id, name, minutes_ago=0):
        return add_activation(activation_repo, license_id, name, minutes_ago)

    return _make
