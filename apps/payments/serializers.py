from decimal import Decimal

from rest_framework import serializers
from .models import Payment


# =============================================================================
# Input Serializers
# =============================================================================

class PaymentIntentSerializer(serializers.Serializer):
    """Validate a payment intent request."""

    amount_in_cents = serializers.IntegerField(min_value=1)


class PaymentIntentResponseSerializer(serializers.Serializer):
    client_secret = serializers.CharField()


class PaymentCreateSerializer(serializers.Serializer):
    """
    Validate a payment record request.

    Missing fields are reported by the service so every precondition
    failure carries the same message.
    """

    registration_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=False,
        allow_null=True
    )
    payment_method = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    transaction_id = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class PaymentFilterSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class PaymentSerializer(serializers.ModelSerializer):
    """Payment with the paid registration's status pair."""

    registration_id = serializers.UUIDField(read_only=True)
    camp_id = serializers.UUIDField(read_only=True, allow_null=True)
    payment_status = serializers.CharField(source='registration.payment_status', read_only=True)
    confirmation_status = serializers.CharField(source='registration.confirmation_status', read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id',
            'registration_id',
            'camp_id',
            'camp_name',
            'email',
            'amount',
            'currency',
            'payment_method',
            'transaction_id',
            'payment_status',
            'confirmation_status',
            'paid_at',
        ]
        read_only_fields = fields
