"""Catalog domain exceptions.

Raised by the service layer when business rules are violated and by the
stores when their calling contract is broken. The API layer translates them
into HTTP responses; nothing in here knows about status codes.
"""


class CatalogServiceError(Exception):
    """Base class for every error raised by the catalog core."""


class CatalogValidationError(CatalogServiceError, ValueError):
    """Caller-supplied data or id violates a precondition.

    Missing entity, empty name, non-positive price, invalid price range or an
    unknown category reference.
    """


class CatalogConflictError(CatalogServiceError):
    """The current state blocks the operation (category still has products)."""


class RepositoryOperationError(CatalogServiceError, RuntimeError):
    """A store was asked to update a record it does not hold.

    The service layer checks existence before every update, so this only
    surfaces when a store is driven directly without that check.
    """
