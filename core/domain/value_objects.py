"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class ProductSlug(ValueObject):
    """Product slug value object."""

    value: str

    def __post_init__(self):
        """Validate slug format."""
        if not self.value:
            raise ValueError("Product slug cannot be empty")
        if not self.value.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"Invalid product slug format: {self.value}")

    def __str__(self) -> str:
        """Return slug as string."""
        return self.value


@dataclass(frozen=True)
class Money(ValueObject):
    """Amount in the smallest currency unit."""

    cents: int
    currency: str = "USD"

    def __post_init__(self):
        """Validate amount."""
        if self.cents < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        """Return amount formatted for display, e.g. '$79' or '$79.50'."""
        symbol = "$" if self.currency == "USD" else f"{self.currency} "
        whole, rest = divmod(self.cents, 100)
        if rest:
            return f"{symbol}{whole}.{rest:02d}"
        return f"{symbol}{whole}"
