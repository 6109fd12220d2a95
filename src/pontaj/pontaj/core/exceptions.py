class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ReferenceDataError(DomainError):
    """Raised when a department code or shift preset id is not known."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when an entity with the same key already exists."""

    status_code = 409


class ExternalServiceError(DomainError):
    """Raised when an upstream service (e.g. public holidays API) fails."""

    status_code = 503
