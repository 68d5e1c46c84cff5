"""
Model registry for the licenses app.

ORM models live in licenses.infrastructure.models.
"""
from licenses.infrastructure.models import License  # noqa: F401
