"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils.html import format_html
from django.utils import timezone

from activations.infrastructure.models import Activation
from licenses.infrastructure.models import License


class ActivationInline(admin.TabularInline):
    """Activations listed on the license page."""

    model = Activation
    extra = 0
    fields = ["name", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "key",
        "user",
        "purchasable",
        "activation_count",
        "expiry_display",
        "created_at",
    ]
    list_filter = ["purchasable__product", "created_at", "expires_at"]
    search_fields = ["key", "user__email", "user__username", "purchasable__title"]
    readonly_fields = ["id", "key", "created_at", "updated_at"]
    raw_id_fields = ["user"]
    inlines = [ActivationInline]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "key", "user", "purchasable"),
            },
        ),
        (
            "Validity",
            {
                "fields": ("expires_at",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def activation_count(self, obj):
        """Display number of activations for this license."""
        return obj.activations.count()

    activation_count.short_description = "Activations"

    def expiry_display(self, obj):
        """Display expiry with color."""
        if not obj.expires_at:
            return "Never"
        if obj.expires_at < timezone.now():
            return format_html('<span style="color: red;">{}</span>', obj.expires_at.date())
        return obj.expires_at.date()

    expiry_display.short_description = "Expires"

    def get_queryset(self, request):
        """Optimize queryset."""
        return (
            super()
            .get_queryset(request)
            .select_related("user", "purchasable__product")
            .prefetch_related("activations")
        )
