"""
Domain-specific exceptions for payments app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class PaymentsServiceError(Exception):
    """Base exception for all payments service errors."""
    pass


class InvalidPaymentError(PaymentsServiceError):
    """Raised when required payment fields are missing or invalid."""
    pass


class InvalidIdentifierError(PaymentsServiceError):
    """Raised when the registration identifier is malformed."""
    pass


class RegistrationNotFoundError(PaymentsServiceError):
    """Raised when the registration being paid for does not exist."""
    pass


class NotRegistrationOwnerError(PaymentsServiceError):
    """Raised when paying for someone else's registration."""
    pass


class AlreadyPaidError(PaymentsServiceError):
    """Raised when the registration has already been paid for."""
    pass


class PaymentProviderError(PaymentsServiceError):
    """Raised when the payment provider rejects or fails a request."""
    pass
