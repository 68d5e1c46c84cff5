"""
Django admin configuration for products app.
"""

from django.contrib import admin
from django.utils.html import format_html

from products.infrastructure.models import Product, ProductMedia, Purchasable


class PurchasableInline(admin.TabularInline):
    """Purchasables edited on the product page."""

    model = Purchasable
    extra = 0
    fields = ["title", "price_in_usd_cents", "released", "is_renewal", "sort_order"]
    ordering = ["sort_order", "created_at"]


class ProductMediaInline(admin.TabularInline):
    """Media edited on the product page."""

    model = ProductMedia
    extra = 0
    fields = ["collection", "url", "alt", "sort_order"]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["title", "slug", "purchasable_count", "created_at"]
    list_filter = ["created_at", "updated_at"]
    search_fields = ["title", "slug"]
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ["id", "created_at", "updated_at"]
    inlines = [PurchasableInline, ProductMediaInline]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "title", "slug"),
            },
        ),
        (
            "Descriptions",
            {
                "fields": ("description", "long_description"),
            },
        ),
        (
            "Links",
            {
                "fields": ("action_url", "action_label", "url"),
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

    def purchasable_count(self, obj):
        """Display number of purchasables for this product."""
        return obj.purchasables.count()

    purchasable_count.short_description = "Purchasables"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).prefetch_related("purchasables")


@admin.register(Purchasable)
class PurchasableAdmin(admin.ModelAdmin):
    """Admin interface for Purchasable model."""

    list_display = ["title", "product", "price_display", "released", "is_renewal", "sort_order"]
    list_filter = ["released", "is_renewal", "product"]
    search_fields = ["title", "product__title", "checkout_product_id"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def price_display(self, obj):
        """Display price in dollars."""
        return format_html("${}", f"{obj.price_in_usd_cents / 100:.2f}")

    price_display.short_description = "Price"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("product")
