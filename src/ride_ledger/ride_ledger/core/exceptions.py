class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a ride or passenger id does not exist."""


class InvalidTransitionError(DomainError):
    """Raised when a ride lifecycle operation is not allowed from its current state."""
