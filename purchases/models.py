"""
Model registry for the purchases app.

ORM models live in purchases.infrastructure.models.
"""
from purchases.infrastructure.models import Purchase  # noqa: F401
