"""
Django admin configuration for activations app.
"""

from django.contrib import admin

from activations.infrastructure.models import Activation


@admin.register(Activation)
class ActivationAdmin(admin.ModelAdmin):
    """Admin interface for Activation model."""

    list_display = [
        "name",
        "license",
        "owner",
        "created_at",
    ]
    list_filter = [
        "created_at",
        "license__purchasable__product",
    ]
    search_fields = [
        "name",
        "license__key",
        "license__user__email",
    ]
    readonly_fields = [
        "id",
        "created_at",
    ]
    raw_id_fields = ["license"]

    def owner(self, obj):
        """Display the license owner."""
        return obj.license.user

    owner.short_description = "Owner"

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super()
            .get_queryset(request)
            .select_related("license__user", "license__purchasable__product")
        )
