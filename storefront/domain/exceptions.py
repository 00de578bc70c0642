# storefront/domain/exceptions.py


class InvalidItem(ValueError):
    """Line item without a usable product identity or quantity."""


class EmptyCartError(ValueError):
    """Invoice requested for a cart with no items."""


class CatalogServiceError(RuntimeError):
    """Data-access failure wrapped at the service boundary."""
