"""
Purchase model.
"""
import uuid

from django.conf import settings
from django.db import models


class Purchase(models.Model):
    """
    A completed checkout, recorded by the checkout-completion handler.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    purchasable = models.ForeignKey(
        "products.Purchasable", on_delete=models.PROTECT, related_name="purchases"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="purchases"
    )
    unlocks_companion_license = models.BooleanField(
        default=False, help_text="Purchase also grants a companion product license"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "purchases"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "purchasable"], name="purchase_user_purchasable_idx"),
        ]

    def __str__(self):
        return f"{self.user} - {self.purchasable}"
