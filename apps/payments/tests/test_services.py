"""
Service layer unit tests for payments app.

Tests cover:
- Status pair transition happens exactly once
- Payment exists iff its registration is paid
- Provider errors surface as PaymentProviderError
"""

import pytest
from decimal import Decimal
from uuid import uuid4
from unittest.mock import patch, MagicMock

import stripe
from django.db import DatabaseError

from apps.payments.models import Payment
from apps.payments.services import (
    create_payment_intent,
    record_payment,
    list_payments,
    StripePaymentGateway,
)
from apps.payments.services.exceptions import (
    InvalidPaymentError,
    InvalidIdentifierError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    AlreadyPaidError,
    PaymentProviderError,
)
from apps.registrations.models import Registration, PaymentStatus, ConfirmationStatus


# =============================================================================
# Record Payment Tests
# =============================================================================

@pytest.mark.django_db
class TestRecordPayment:
    """Tests for record_payment()."""

    def test_record_payment_flips_status_pair(self, registration, participant):
        payment = record_payment(
            registration_id=registration.id,
            email=participant.email,
            amount=Decimal('30.00'),
            payment_method='card',
            transaction_id='pi_1',
        )

        registration.refresh_from_db()
        assert registration.payment_status == PaymentStatus.PAID
        assert registration.confirmation_status == ConfirmationStatus.CONFIRMED
        assert payment.registration_id == registration.id
        assert payment.camp_name == 'Child Vaccination'
        assert payment.currency == 'usd'
        assert payment.paid_at is not None

    def test_second_payment_is_conflict(self, registration, participant):
        record_payment(registration_id=registration.id, email=participant.email, amount=Decimal('30.00'))

        with pytest.raises(AlreadyPaidError):
            record_payment(registration_id=registration.id, email=participant.email, amount=Decimal('30.00'))

        assert Payment.objects.filter(registration=registration).count() == 1

    def test_missing_fields(self, registration, participant):
        with pytest.raises(InvalidPaymentError):
            record_payment(registration_id=None, email=participant.email, amount=Decimal('1.00'))
        with pytest.raises(InvalidPaymentError):
            record_payment(registration_id=registration.id, email='', amount=Decimal('1.00'))
        with pytest.raises(InvalidPaymentError):
            record_payment(registration_id=registration.id, email=participant.email, amount=None)

    def test_invalid_registration_id(self, participant):
        with pytest.raises(InvalidIdentifierError):
            record_payment(registration_id='nope', email=participant.email, amount=Decimal('1.00'))

    def test_unknown_registration(self, participant):
        with pytest.raises(RegistrationNotFoundError):
            record_payment(registration_id=uuid4(), email=participant.email, amount=Decimal('1.00'))

        assert Payment.objects.count() == 0

    def test_someone_elses_registration(self, registration):
        with pytest.raises(NotRegistrationOwnerError):
            record_payment(registration_id=registration.id, email='other@example.com', amount=Decimal('1.00'))

        registration.refresh_from_db()
        assert registration.payment_status == PaymentStatus.UNPAID

    def test_insert_failure_rolls_back_status(self, registration, participant):
        """No payment record means the registration stays unpaid."""
        with patch.object(Payment.objects, 'create', side_effect=DatabaseError('disk full')):
            with pytest.raises(DatabaseError):
                record_payment(
                    registration_id=registration.id,
                    email=participant.email,
                    amount=Decimal('30.00'),
                )

        registration.refresh_from_db()
        assert registration.payment_status == PaymentStatus.UNPAID
        assert registration.confirmation_status == ConfirmationStatus.PENDING
        assert Payment.objects.count() == 0

    def test_list_payments(self, registration, participant, camp):
        record_payment(registration_id=registration.id, email=participant.email, amount=Decimal('30.00'))
        other = Registration.objects.create(camp=camp, email='x@example.com', camp_name=camp.name)
        record_payment(registration_id=other.id, email='x@example.com', amount=Decimal('30.00'))

        assert list_payments(email=participant.email).count() == 1
        assert list_payments().count() == 2


# =============================================================================
# Payment Intent Tests
# =============================================================================

class TestPaymentIntent:
    """Tests for create_payment_intent() and the Stripe gateway."""

    @patch('stripe.PaymentIntentService.create')
    def test_create_intent(self, mock_create):
        mock_create.return_value = MagicMock(client_secret='pi_123_secret_456')

        secret = create_payment_intent(amount_in_cents=3000)

        assert secret == 'pi_123_secret_456'
        kwargs = mock_create.call_args.kwargs['params']
        assert kwargs['amount'] == 3000
        assert kwargs['currency'] == 'usd'
        assert kwargs['payment_method_types'] == ['card']

    @patch('stripe.PaymentIntentService.create')
    def test_provider_error(self, mock_create):
        mock_create.side_effect = stripe.InvalidRequestError(
            'Amount must be at least 50 cents', param='amount'
        )

        with pytest.raises(PaymentProviderError) as exc_info:
            create_payment_intent(amount_in_cents=10)

        assert 'Amount must be at least 50 cents' in str(exc_info.value)

    @pytest.mark.parametrize('amount', [0, -5, None, '100', True])
    def test_invalid_amount(self, amount):
        with pytest.raises(InvalidPaymentError):
            create_payment_intent(amount_in_cents=amount)

    def test_gateway_uses_bounded_http_client(self):
        gateway = StripePaymentGateway(api_key='sk_test_x', timeout=3)

        assert isinstance(gateway.http_client, stripe.RequestsClient)

    @patch('stripe.PaymentIntentService.create')
    def test_gateway_leaves_global_stripe_config_alone(self, mock_create):
        mock_create.return_value = MagicMock(client_secret='pi_9_secret_9')
        global_client = stripe.default_http_client
        global_key = stripe.api_key

        StripePaymentGateway(api_key='sk_test_a', timeout=3).create_intent(1000)
        StripePaymentGateway(api_key='sk_test_b', timeout=30).create_intent(2000)

        assert stripe.default_http_client is global_client
        assert stripe.api_key == global_key
        assert mock_create.call_count == 2
