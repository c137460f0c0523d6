# storefront/domain/errors.py


class StorefrontError(Exception):
    """Base class for every error raised by the storefront services."""


class ValidationError(StorefrontError, ValueError):
    """Field-level validation failure. `errors` maps field name to message."""

    def __init__(self, errors: dict[str, str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = dict(errors)


class EmptyCartError(StorefrontError, ValueError):
    pass


class ProductNotFoundError(StorefrontError, LookupError):
    pass


class TransientFetchError(StorefrontError, RuntimeError):
    """Catalog request failed; the same request may be retried."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FetchCancelled(StorefrontError):
    """The fetch was superseded by a newer one. This is not a failure."""


class StoragePersistError(StorefrontError, RuntimeError):
    pass


class SimulatedOrderError(StorefrontError, RuntimeError):
    """Simulated order placement failed; the cart is left untouched."""


class CheckoutInProgressError(StorefrontError, RuntimeError):
    pass
