"""
Entitlements of a viewer on one product.

The product page shows either the viewer's licenses or, when there are
none, their purchases. The choice is made once, here, and rendering
branches on the variant's kind.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from licenses.domain.license import License
from purchases.domain.purchase import Purchase


@dataclass(frozen=True)
class HasLicenses:
    """The viewer owns at least one license for the product."""

    licenses: Tuple[License, ...]
    kind: str = "licenses"

    def __post_init__(self):
        if not self.licenses:
            raise ValueError("HasLicenses needs at least one license")

    @property
    def getting_started_description(self) -> Optional[str]:
        """Getting-started text of the first license's purchasable."""
        purchasable = self.licenses[0].purchasable
        return purchasable.getting_started_description if purchasable else None


@dataclass(frozen=True)
class HasPurchases:
    """The viewer bought the product without holding a license for it."""

    purchases: Tuple[Purchase, ...]
    kind: str = "purchases"

    def __post_init__(self):
        if not self.purchases:
            raise ValueError("HasPurchases needs at least one purchase")


@dataclass(frozen=True)
class NoEntitlements:
    """Anonymous viewer, or nothing owned for this product."""

    kind: str = "none"


Entitlements = Union[HasLicenses, HasPurchases, NoEntitlements]


def has_any(entitlements: Entitlements) -> bool:
    """Whether the viewer owns anything for the product."""
    return not isinstance(entitlements, NoEntitlements)


def choose_entitlements(
    licenses: Sequence[License], purchases: Sequence[Purchase] = ()
) -> Entitlements:
    """
    Pick the variant to render.

    Licenses win over purchases; purchases are ignored entirely once a
    license exists.
    """
    if licenses:
        return HasLicenses(licenses=tuple(licenses))
    if purchases:
        return HasPurchases(purchases=tuple(purchases))
    return NoEntitlements()
