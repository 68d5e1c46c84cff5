"""
Activation Django ORM model.

This is the infrastructure layer model for activations.
Domain entities are in activations.domain.activation.
"""
import uuid

from django.core.exceptions import ValidationError
from django.db import models


class Activation(models.Model):
    """
    A named machine on which a license is activated.
    Removed for good when the owner deletes it.
    """

    id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    license = models.ForeignKey(
        "licenses.License",
        on_delete=models.CASCADE,
        related_name="activations",
    )
    name = models.CharField(
        max_length=255, help_text="Machine name, e.g. MacBook"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "activations"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["license", "created_at"], name="activation_license_created_idx"
            ),
        ]

    def clean(self):
        """Validate activation fields."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValidationError("Activation name cannot be empty")

    def save(self, *args, **kwargs):
        """Save activation with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
