"""
Domain-specific exceptions for registrations app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class RegistrationsServiceError(Exception):
    """Base exception for all registrations service errors."""
    pass


class MissingCampError(RegistrationsServiceError):
    """Raised when a registration is submitted without a camp."""
    pass


class InvalidIdentifierError(RegistrationsServiceError):
    """Raised when a registration or camp identifier is malformed."""
    pass


class CampNotFoundError(RegistrationsServiceError):
    """Raised when the camp being registered for does not exist."""
    pass


class RegistrationNotFoundError(RegistrationsServiceError):
    """Raised when a registration does not exist (for the given camp)."""
    pass


class NotRegistrationOwnerError(RegistrationsServiceError):
    """Raised when a participant acts on someone else's registration."""
    pass


class RegistrationAlreadyPaidError(RegistrationsServiceError):
    """Raised when cancelling a registration that has been paid for."""
    pass
