"""
Domain-specific exceptions for camps app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CampsServiceError(Exception):
    """Base exception for all camps service errors."""
    pass


class InvalidCampIdError(CampsServiceError):
    """Raised when a camp identifier is malformed."""
    pass


class CampNotFoundError(CampsServiceError):
    """Raised when a camp does not exist."""
    pass


class CampHasRegistrationsError(CampsServiceError):
    """Raised when deleting a camp that registrations still reference."""
    pass


class InvalidPaginationError(CampsServiceError):
    """Raised when page or limit is not a positive integer."""
    pass


class ParticipantCountError(CampsServiceError):
    """Raised when a participant count adjustment is not allowed."""
    pass
