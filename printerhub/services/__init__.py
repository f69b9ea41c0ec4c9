"""Service layer: business rules over the DAOs."""


class ServiceError(Exception):
    """Base service exception."""


class NotFoundError(ServiceError):
    """Resource not found (-> HTTP 404)."""


class ConflictError(ServiceError):
    """Uniqueness conflict on create (-> HTTP 409)."""


class ValidationError(ServiceError):
    """Input rejected by a business rule (-> HTTP 400)."""
