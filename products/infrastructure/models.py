"""
Product, Purchasable and ProductMedia models.
"""
import uuid

from django.db import models


class Product(models.Model):
    """
    A product shown in the storefront (e.g., a desktop app or a course).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.SlugField(max_length=100, unique=True, help_text="URL-safe identifier")
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, help_text="Short description for the banner")
    long_description = models.TextField(blank=True, help_text="Description below the fold")
    action_url = models.URLField(max_length=500, blank=True)
    action_label = models.CharField(max_length=100, blank=True)
    url = models.URLField(max_length=500, blank=True, help_text="External product site")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["title"]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.slug:
            raise ValidationError("Slug is required")
        if not self.title:
            raise ValidationError("Title is required")
        if self.action_url and not self.action_label:
            raise ValidationError("An action URL needs an action label")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title


class Purchasable(models.Model):
    """
    A buyable variant of a product, e.g. a license tier or a renewal.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="purchasables")
    title = models.CharField(max_length=255)
    price_in_usd_cents = models.PositiveIntegerField(default=0)
    checkout_product_id = models.CharField(
        max_length=100, blank=True, help_text="Product id at the checkout provider"
    )
    released = models.BooleanField(default=False, help_text="Visible in purchase listings")
    is_renewal = models.BooleanField(default=False, help_text="Only renews an existing license")
    getting_started_url = models.URLField(max_length=500, blank=True)
    getting_started_description = models.TextField(blank=True)
    sort_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "purchasables"
        ordering = ["sort_order", "created_at"]
        indexes = [
            models.Index(fields=["product", "released", "is_renewal"], name="purchasable_listing_idx"),
        ]

    def __str__(self):
        return f"{self.product.title} - {self.title}"


class ProductMedia(models.Model):
    """
    Media attached to a product, grouped in named collections.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="media")
    collection = models.CharField(max_length=100, default="product-image", db_index=True)
    url = models.URLField(max_length=500)
    alt = models.CharField(max_length=255, blank=True)
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "product_media"
        ordering = ["sort_order", "id"]
        verbose_name_plural = "product media"

    def __str__(self):
        return f"{self.product.title} [{self.collection}]"
