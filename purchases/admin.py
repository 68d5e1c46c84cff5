"""
Django admin configuration for purchases app.
"""

from django.contrib import admin

from purchases.infrastructure.models import Purchase


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    """Admin interface for Purchase model."""

    list_display = ["id", "user", "purchasable", "unlocks_companion_license", "created_at"]
    list_filter = ["unlocks_companion_license", "created_at", "purchasable__product"]
    search_fields = ["user__email", "user__username", "purchasable__title"]
    readonly_fields = ["id", "created_at"]
    raw_id_fields = ["user"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super()
            .get_queryset(request)
            .select_related("user", "purchasable__product")
        )
