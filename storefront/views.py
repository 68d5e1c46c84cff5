"""
Storefront views.

Pages are rendered synchronously. Session and user access happen here in
the sync part of each view, and the async handlers are driven through
async_to_sync.
"""

import uuid
from typing import Iterable, List, Optional, Set, Tuple

from asgiref.sync import async_to_sync
from django.conf import settings
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render
from django.views import View

from activations.components import ActivationListComponent, Rejected
from activations.infrastructure.recently_deleted import RecentlyDeletedActivations
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from core.domain.exceptions import AccessDeniedError, NotFoundError, ProductNotFoundError
from core.infrastructure.transient_state import TransientSessionSlot
from core.metrics import product_page_views_total
from licenses.application.handlers.resolve_entitlements_handler import (
    ResolveEntitlementsHandler,
)
from licenses.application.queries.resolve_entitlements import ResolveEntitlementsQuery
from licenses.domain.entitlements import Entitlements, HasLicenses, has_any
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from products.application.dto.catalog_dto import ProductCatalogDTO
from products.application.handlers.get_product_catalog_handler import GetProductCatalogHandler
from products.application.handlers.list_products_handler import ListProductsHandler
from products.application.queries.get_product_catalog import GetProductCatalogQuery
from products.application.queries.list_products import ListProductsQuery
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from purchases.application.services.purchase_confirmation import (
    PendingConfirmation,
    PurchaseConfirmation,
    PurchaseConfirmationService,
    take_pending_confirmation,
)
from purchases.infrastructure.repositories.django_purchase_repository import (
    DjangoPurchaseRepository,
)

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()
_purchase_repo = DjangoPurchaseRepository()
_license_repo = DjangoLicenseRepository()
_activation_repo = DjangoActivationRepository()


def _viewer_id(request: HttpRequest) -> Optional[int]:
    return request.user.id if request.user.is_authenticated else None


def _activation_list(
    license_id: uuid.UUID, viewer_id: Optional[int], deleted_ids: Iterable[uuid.UUID] = ()
) -> ActivationListComponent:
    return ActivationListComponent(
        license_id=license_id,
        viewer_id=viewer_id,
        license_repository=_license_repo,
        activation_repository=_activation_repo,
        deleted_ids=deleted_ids,
    )


class ProductIndexView(View):
    """All products, the breadcrumb target of the detail page."""

    def get(self, request: HttpRequest) -> HttpResponse:
        products = async_to_sync(ListProductsHandler(_product_repo).handle)(ListProductsQuery())
        return render(request, "storefront/products/index.html", {"products": products})


class ProductDetailView(View):
    """Product page with the viewer's licenses, purchases and price cards."""

    template_name = "storefront/products/detail.html"

    def get(self, request: HttpRequest, slug: str) -> HttpResponse:
        pending = take_pending_confirmation(TransientSessionSlot(request.session))
        viewer_id = _viewer_id(request)
        deleted_ids = RecentlyDeletedActivations(request.session).ids()

        try:
            catalog, entitlements, confirmation, components = async_to_sync(self._load)(
                slug, viewer_id, pending, deleted_ids
            )
        except ProductNotFoundError as e:
            raise Http404(e.message) from e

        product_page_views_total.labels(entitlement=entitlements.kind).inc()

        license_rows: List[Tuple[License, str]] = []
        if isinstance(entitlements, HasLicenses):
            license_rows = [
                (license, component.render(request))
                for license, component in zip(entitlements.licenses, components)
            ]

        context = {
            "product": catalog.product,
            "product_image": catalog.product.first_media(),
            "purchasables": catalog.purchasables,
            "entitlements": entitlements,
            "has_entitlements": has_any(entitlements),
            "license_rows": license_rows,
            "confirmation": confirmation,
            "companion_product_url": settings.STOREFRONT_COMPANION_PRODUCT_URL,
            "discount_percent": settings.STOREFRONT_FOLLOW_UP_DISCOUNT_PERCENT,
        }
        return render(request, self.template_name, context)

    async def _load(
        self,
        slug: str,
        viewer_id: Optional[int],
        pending: Optional[PendingConfirmation],
        deleted_ids: Set[uuid.UUID],
    ) -> Tuple[
        ProductCatalogDTO,
        Entitlements,
        Optional[PurchaseConfirmation],
        List[ActivationListComponent],
    ]:
        catalog = await GetProductCatalogHandler(_product_repo).handle(
            GetProductCatalogQuery(slug=slug)
        )
        entitlements = await ResolveEntitlementsHandler(
            license_repository=_license_repo,
            purchase_repository=_purchase_repo,
        ).handle(ResolveEntitlementsQuery(viewer_id=viewer_id, product_id=catalog.product.id))
        confirmation = await PurchaseConfirmationService(
            product_repository=_product_repo,
            purchase_repository=_purchase_repo,
        ).resolve(pending, viewer_id, product_id=catalog.product.id)

        components = []
        if isinstance(entitlements, HasLicenses):
            for license in entitlements.licenses:
                component = _activation_list(license.id, viewer_id, deleted_ids)
                await component.refresh()
                components.append(component)
        return catalog, entitlements, confirmation, components


class ActivationListFragmentView(LoginRequiredMixin, View):
    """Activation list fragment, fetched by the page's poller."""

    def get(self, request: HttpRequest, license_id: uuid.UUID) -> HttpResponse:
        component = _activation_list(
            license_id, _viewer_id(request), RecentlyDeletedActivations(request.session).ids()
        )
        try:
            async_to_sync(component.refresh)()
        except NotFoundError as e:
            raise Http404(e.message) from e
        except AccessDeniedError as e:
            raise PermissionDenied(e.message) from e
        return HttpResponse(component.render(request))


class ActivationDeleteView(LoginRequiredMixin, View):
    """Delete one activation and answer with the re-fetched fragment."""

    def post(
        self, request: HttpRequest, license_id: uuid.UUID, activation_id: uuid.UUID
    ) -> HttpResponse:
        recently_deleted = RecentlyDeletedActivations(request.session)
        component = _activation_list(license_id, _viewer_id(request), recently_deleted.ids())
        outcome = async_to_sync(component.delete)(activation_id)
        if isinstance(outcome, Rejected):
            return HttpResponse(
                component.render(request, rejected=outcome), status=outcome.status_code
            )
        recently_deleted.add(outcome.activation.id)
        return HttpResponse(component.render(request))
