"""
Payment management service.

Recording a payment flips the registration's status pair and inserts the
payment record in one transaction, so a payment exists exactly when its
registration is paid and confirmed.
"""

import logging
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet

from apps.camps.services import parse_uuid
from apps.payments.models import Payment
from apps.registrations.models import Registration, PaymentStatus, ConfirmationStatus

from .exceptions import (
    InvalidPaymentError,
    InvalidIdentifierError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    AlreadyPaidError,
)
from .gateway import get_payment_gateway

logger = logging.getLogger(__name__)


def create_payment_intent(*, amount_in_cents: int) -> str:
    """
    Ask the payment provider for a card PaymentIntent.

    Args:
        amount_in_cents: Amount to charge in the smallest currency unit

    Returns:
        Client secret of the created intent

    Raises:
        InvalidPaymentError: If amount is not a positive integer
        PaymentProviderError: If the provider rejects the request
    """
    if not isinstance(amount_in_cents, int) or isinstance(amount_in_cents, bool) or amount_in_cents <= 0:
        raise InvalidPaymentError("Amount must be a positive number of cents")

    return get_payment_gateway().create_intent(amount_in_cents)


@transaction.atomic
def record_payment(
    *,
    registration_id=None,
    email: str,
    amount: Optional[Decimal] = None,
    payment_method: str = '',
    transaction_id: str = ''
) -> Payment:
    """
    Record a completed payment for a registration.

    This operation:
    1. Locks the registration row
    2. Flips its status pair from unpaid/pending to paid/confirmed
    3. Inserts the payment record

    Args:
        registration_id: UUID of the registration being paid for
        email: Email of the paying participant
        amount: Amount paid
        payment_method: Payment method reported by the client
        transaction_id: Provider transaction identifier

    Returns:
        Created Payment instance

    Raises:
        InvalidPaymentError: If registration_id, email or amount is missing
        InvalidIdentifierError: If registration_id is malformed
        RegistrationNotFoundError: If registration doesn't exist
        NotRegistrationOwnerError: If the registration belongs to someone else
        AlreadyPaidError: If the registration was already paid for
    """
    if not registration_id or not email or amount is None:
        raise InvalidPaymentError("registration_id, email and amount are required")

    registration_uuid = parse_uuid(
        registration_id, error_class=InvalidIdentifierError, label='registration ID'
    )

    try:
        registration = Registration.objects.select_for_update().get(id=registration_uuid)
    except Registration.DoesNotExist:
        raise RegistrationNotFoundError("Registration not found")

    if registration.email != email:
        raise NotRegistrationOwnerError("You can only pay for your own registrations")

    flipped = Registration.objects.filter(
        id=registration.id,
        payment_status=PaymentStatus.UNPAID,
    ).update(
        payment_status=PaymentStatus.PAID,
        confirmation_status=ConfirmationStatus.CONFIRMED,
    )

    if flipped == 0:
        raise AlreadyPaidError("Registration has already been paid")

    registration.payment_status = PaymentStatus.PAID
    registration.confirmation_status = ConfirmationStatus.CONFIRMED

    payment = Payment.objects.create(
        registration=registration,
        camp_id=registration.camp_id,
        camp_name=registration.camp_name,
        email=email,
        amount=amount,
        currency=settings.PAYMENT_CURRENCY,
        payment_method=payment_method,
        transaction_id=transaction_id,
    )

    logger.info(
        "Payment %s recorded for registration %s (%s %s)",
        payment.id, registration.id, amount, payment.currency
    )
    return payment


def list_payments(*, email: Optional[str] = None) -> QuerySet[Payment]:
    """
    Payments newest first, optionally for one participant.

    Args:
        email: Only payments of this participant; None returns all
    """
    queryset = Payment.objects.select_related('registration')
    if email is not None:
        queryset = queryset.filter(email=email)
    return queryset.order_by('-paid_at')
