"""
URL configuration for storefront pages.
"""

from django.urls import path

from storefront import views

app_name = "storefront"

urlpatterns = [
    path("products/", views.ProductIndexView.as_view(), name="product-index"),
    path("products/<slug:slug>/", views.ProductDetailView.as_view(), name="product-detail"),
    path(
        "licenses/<uuid:license_id>/activations/",
        views.ActivationListFragmentView.as_view(),
        name="activation-list",
    ),
    path(
        "licenses/<uuid:license_id>/activations/<uuid:activation_id>/delete/",
        views.ActivationDeleteView.as_view(),
        name="activation-delete",
    ),
]
