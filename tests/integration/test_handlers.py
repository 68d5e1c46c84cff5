"""
Integration tests for the application handlers over the Django repositories.
"""
import pytest
from asgiref.sync import async_to_sync

from activations.application.commands.delete_activation import DeleteActivationCommand
from activations.application.handlers.delete_activation_handler import DeleteActivationHandler
from activations.infrastructure.models import Activation as ActivationModel
from core.domain.exceptions import (
    ActivationAccessDeniedError,
    ActivationNotFoundError,
    ProductNotFoundError,
)
from core.infrastructure.transient_state import TransientSessionSlot
from licenses.application.handlers.resolve_entitlements_handler import (
    ResolveEntitlementsHandler,
)
from licenses.application.queries.resolve_entitlements import ResolveEntitlementsQuery
from licenses.domain.entitlements import HasLicenses, HasPurchases, NoEntitlements
from products.application.handlers.get_product_catalog_handler import GetProductCatalogHandler
from products.application.queries.get_product_catalog import GetProductCatalogQuery
from purchases.application.services.purchase_confirmation import (
    PurchaseConfirmationService,
    record_sale,
    take_pending_confirmation,
)


@pytest.mark.django_db
@pytest.mark.integration
class TestCatalog:
    """Catalog reading against the database."""

    def test_unreleased_never_listed(
        self, product_repository, released_purchasable, unreleased_purchasable, renewal_purchasable
    ):
        catalog = async_to_sync(GetProductCatalogHandler(product_repository).handle)(
            GetProductCatalogQuery(slug="mailcoach")
        )

        assert [p.id for p in catalog.purchasables] == [released_purchasable.id]

    def test_missing_product(self, product_repository, db):
        with pytest.raises(ProductNotFoundError):
            async_to_sync(GetProductCatalogHandler(product_repository).handle)(
                GetProductCatalogQuery(slug="missing")
            )


@pytest.mark.django_db
@pytest.mark.integration
class TestEntitlements:
    """Entitlement resolution against the database."""

    def _resolve(self, license_repository, purchase_repository, viewer_id, product_id):
        handler = ResolveEntitlementsHandler(license_repository, purchase_repository)
        return async_to_sync(handler.handle)(
            ResolveEntitlementsQuery(viewer_id=viewer_id, product_id=product_id)
        )

    def test_licenses_preferred(
        self, license_repository, purchase_repository, user, db_product, db_license, db_purchase
    ):
        entitlements = self._resolve(license_repository, purchase_repository, user.id, db_product.id)

        assert isinstance(entitlements, HasLicenses)
        assert [l.id for l in entitlements.licenses] == [db_license.id]

    def test_purchases_without_licenses(
        self, license_repository, purchase_repository, user, db_product, db_purchase
    ):
        entitlements = self._resolve(license_repository, purchase_repository, user.id, db_product.id)

        assert isinstance(entitlements, HasPurchases)

    def test_anonymous(self, license_repository, purchase_repository, db_product, db_license):
        entitlements = self._resolve(license_repository, purchase_repository, None, db_product.id)

        assert isinstance(entitlements, NoEntitlements)


@pytest.mark.django_db
@pytest.mark.integration
class TestPurchaseConfirmation:
    """Post-checkout confirmation against the database."""

    def test_single_read(
        self, product_repository, purchase_repository, user, released_purchasable, db_purchase
    ):
        slot = TransientSessionSlot({})
        record_sale(slot, released_purchasable.id, db_purchase.id)
        service = PurchaseConfirmationService(product_repository, purchase_repository)

        first = async_to_sync(service.resolve)(take_pending_confirmation(slot), user.id)
        second = async_to_sync(service.resolve)(take_pending_confirmation(slot), user.id)

        assert first.purchasable.id == released_purchasable.id
        assert first.purchase.id == db_purchase.id
        assert second is None

    def test_viewer_mismatch(
        self, product_repository, purchase_repository, other_user, released_purchasable, db_purchase
    ):
        slot = TransientSessionSlot({})
        record_sale(slot, released_purchasable.id, db_purchase.id)
        service = PurchaseConfirmationService(product_repository, purchase_repository)

        confirmation = async_to_sync(service.resolve)(
            take_pending_confirmation(slot), other_user.id
        )

        assert confirmation is None


@pytest.mark.django_db
@pytest.mark.integration
class TestDeleteActivation:
    """Deleting activations against the database."""

    def _delete(self, license_repository, activation_repository, viewer_id, license_id, activation_id):
        handler = DeleteActivationHandler(license_repository, activation_repository)
        return async_to_sync(handler.handle)(
            DeleteActivationCommand(viewer_id, license_id, activation_id)
        )

    def test_delete_macbook(
        self, license_repository, activation_repository, user, db_license, db_activations
    ):
        macbook, office_pc = db_activations

        self._delete(license_repository, activation_repository, user.id, db_license.id, macbook.id)

        remaining = ActivationModel.objects.filter(license=db_license)
        assert [a.name for a in remaining] == ["Office PC"]

    def test_delete_twice(
        self, license_repository, activation_repository, user, db_license, db_activations
    ):
        macbook = db_activations[0]
        self._delete(license_repository, activation_repository, user.id, db_license.id, macbook.id)

        with pytest.raises(ActivationNotFoundError):
            self._delete(
                license_repository, activation_repository, user.id, db_license.id, macbook.id
            )

    def test_cross_license_delete(
        self,
        license_repository,
        activation_repository,
        user,
        db_license,
        db_activations,
        other_activation,
    ):
        with pytest.raises(ActivationAccessDeniedError):
            self._delete(
                license_repository,
                activation_repository,
                user.id,
                db_license.id,
                other_activation.id,
            )

        assert ActivationModel.objects.filter(license=db_license).count() == 2
        assert ActivationModel.objects.filter(id=other_activation.id).exists()
