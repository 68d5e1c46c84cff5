"""
Model registry for the products app.

ORM models live in products.infrastructure.models.
"""
from products.infrastructure.models import Product, ProductMedia, Purchasable  # noqa: F401
