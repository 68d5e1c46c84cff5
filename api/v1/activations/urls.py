"""
URL configuration for activation API endpoints.
"""

from django.urls import path

from api.v1.activations import views

app_name = "activations"

urlpatterns = [
    path(
        "<uuid:license_id>/activations",
        views.ActivationListView.as_view(),
        name="activation-list",
    ),
    path(
        "<uuid:license_id>/activations/<uuid:activation_id>",
        views.ActivationDetailView.as_view(),
        name="activation-delete",
    ),
]
