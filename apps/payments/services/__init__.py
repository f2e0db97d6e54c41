"""
Payments app services layer.

Provider access goes through the gateway; recording a payment and
confirming its registration happen together.
"""

from .exceptions import (
    PaymentsServiceError,
    InvalidPaymentError,
    InvalidIdentifierError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    AlreadyPaidError,
    PaymentProviderError,
)

from .gateway import (
    StripePaymentGateway,
    get_payment_gateway,
)

from .payment_management import (
    create_payment_intent,
    record_payment,
    list_payments,
)


__all__ = [
    # Exceptions
    'PaymentsServiceError',
    'InvalidPaymentError',
    'InvalidIdentifierError',
    'RegistrationNotFoundError',
    'NotRegistrationOwnerError',
    'AlreadyPaidError',
    'PaymentProviderError',

    # Gateway
    'StripePaymentGateway',
    'get_payment_gateway',

    # Payment Management
    'create_payment_intent',
    'record_payment',
    'list_payments',
]
