"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class NotFoundError(DomainError):
    """Raised when a blog does not exist in the store."""


class MalformedIdentifierError(DomainError):
    """Raised when an identifier does not fit the store's key space."""


class StoreError(DomainError):
    """Raised when store operations fail (DB unavailable, network, etc.)."""
