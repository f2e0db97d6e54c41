"""
Payment provider gateway.

Thin wrapper over Stripe PaymentIntents. The rest of the app only ever
sees a client secret or a PaymentProviderError.
"""

import logging

import stripe
from django.conf import settings

from .exceptions import PaymentProviderError

logger = logging.getLogger(__name__)


class StripePaymentGateway:
    """
    Creates card-only PaymentIntents with a bounded request time.

    Each gateway talks through its own ``StripeClient``; the module-level
    ``stripe`` configuration is never touched.
    """

    def __init__(self, api_key, currency='usd', timeout=10):
        self.api_key = api_key
        self.currency = currency
        self.http_client = stripe.RequestsClient(timeout=timeout)
        self._client = None

    def _get_client(self) -> stripe.StripeClient:
        if self._client is None:
            self._client = stripe.StripeClient(self.api_key, http_client=self.http_client)
        return self._client

    def create_intent(self, amount_in_cents: int) -> str:
        """
        Create a PaymentIntent and return its client secret.

        Raises:
            PaymentProviderError: With the provider's message on any Stripe error
        """
        try:
            intent = self._get_client().payment_intents.create(params={
                'amount': amount_in_cents,
                'currency': self.currency,
                'payment_method_types': ['card'],
            })
        except stripe.StripeError as e:
            message = e.user_message or str(e) or 'Payment provider error'
            logger.error("Stripe PaymentIntent creation failed: %s", message)
            raise PaymentProviderError(message)

        return intent.client_secret


def get_payment_gateway() -> StripePaymentGateway:
    """Gateway configured from settings."""
    return StripePaymentGateway(
        api_key=settings.STRIPE_SECRET_KEY,
        currency=settings.PAYMENT_CURRENCY,
        timeout=settings.PAYMENT_PROVIDER_TIMEOUT,
    )
