import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "slug",
                    models.SlugField(help_text="URL-safe identifier", max_length=100, unique=True),
                ),
                ("title", models.CharField(max_length=255)),
                (
                    "description",
                    models.TextField(blank=True, help_text="Short description for the banner"),
                ),
                (
                    "long_description",
                    models.TextField(blank=True, help_text="Description below the fold"),
                ),
                ("action_url", models.URLField(blank=True, max_length=500)),
                ("action_label", models.CharField(blank=True, max_length=100)),
                (
                    "url",
                    models.URLField(blank=True, help_text="External product site", max_length=500),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["title"],
            },
        ),
        migrations.CreateModel(
            name="Purchasable",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("price_in_usd_cents", models.PositiveIntegerField(default=0)),
                (
                    "checkout_product_id",
                    models.CharField(
                        blank=True, help_text="Product id at the checkout provider", max_length=100
                    ),
                ),
                (
                    "released",
                    models.BooleanField(default=False, help_text="Visible in purchase listings"),
                ),
                (
                    "is_renewal",
                    models.BooleanField(
                        default=False, help_text="Only renews an existing license"
                    ),
                ),
                ("getting_started_url", models.URLField(blank=True, max_length=500)),
                ("getting_started_description", models.TextField(blank=True)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="purchasables",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "db_table": "purchasables",
                "ordering": ["sort_order", "created_at"],
                "indexes": [
                    models.Index(
                        fields=["product", "released", "is_renewal"],
                        name="purchasable_listing_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="ProductMedia",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "collection",
                    models.CharField(db_index=True, default="product-image", max_length=100),
                ),
                ("url", models.URLField(max_length=500)),
                ("alt", models.CharField(blank=True, max_length=255)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="media",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "db_table": "product_media",
                "ordering": ["sort_order", "id"],
                "verbose_name_plural": "product media",
            },
        ),
    ]
