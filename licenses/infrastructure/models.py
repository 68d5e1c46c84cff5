"""
License model.
"""
import uuid

from django.conf import settings
from django.db import models

from licenses.domain.license import generate_license_key


class License(models.Model):
    """
    Grants a viewer rights to one purchasable of a product.
    Activations (installed seats) hang off a license.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="licenses"
    )
    purchasable = models.ForeignKey(
        "products.Purchasable", on_delete=models.PROTECT, related_name="licenses"
    )
    key = models.CharField(max_length=100, unique=True, editable=False)
    expires_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "purchasable"], name="license_user_purchasable_idx"),
        ]

    def __str__(self):
        return self.key

    def save(self, *args, **kwargs):
        """Generate the license key on first save."""
        if not self.key:
            self.key = generate_license_key()
        super().save(*args, **kwargs)
