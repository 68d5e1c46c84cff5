"""
Model registry for the activations app.

ORM models live in activations.infrastructure.models.
"""
from activations.infrastructure.models import Activation  # noqa: F401
