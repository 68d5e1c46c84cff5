"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class NotFoundError(DomainException):
    """Base exception for records that are absent or not visible."""

    pass


class AccessDeniedError(DomainException):
    """Base exception for operations on records the viewer does not own."""

    pass


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class PurchasableNotFoundError(NotFoundError):
    """Raised when a purchasable is not found."""

    def __init__(self, message: str = "Purchasable not found"):
        super().__init__(message, code="PURCHASABLE_NOT_FOUND")


class LicenseNotFoundError(NotFoundError):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class ActivationNotFoundError(NotFoundError):
    """Raised when an activation is not found."""

    def __init__(self, message: str = "Activation not found"):
        super().__init__(message, code="ACTIVATION_NOT_FOUND")


class LicenseAccessDeniedError(AccessDeniedError):
    """Raised when a viewer acts on a license they do not own."""

    def __init__(self, message: str = "License does not belong to the viewer"):
        super().__init__(message, code="LICENSE_ACCESS_DENIED")


class ActivationAccessDeniedError(AccessDeniedError):
    """Raised when an activation does not belong to the bound license."""

    def __init__(self, message: str = "Activation does not belong to this license"):
        super().__init__(message, code="ACTIVATION_ACCESS_DENIED")
