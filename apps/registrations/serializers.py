from rest_framework import serializers
from .models import Registration


# =============================================================================
# Input Serializers
# =============================================================================

class RegistrationCreateSerializer(serializers.Serializer):
    """
    Validate registration payload.

    ``camp_id`` is passed through as-is; the service tells a missing camp
    (invalid input) from a malformed one (invalid id).
    """

    camp_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    participant_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    age = serializers.IntegerField(min_value=0, max_value=150, required=False, allow_null=True)
    phone_number = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    gender = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    emergency_contact = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class RegistrationFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for a participant's registrations.

    Query Parameters:
        email (str): Participant email; defaults to the caller
    """

    email = serializers.EmailField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class RegistrationSerializer(serializers.ModelSerializer):
    """Main serializer for registrations."""

    camp_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Registration
        fields = [
            'id',
            'camp_id',
            'camp_name',
            'fees',
            'email',
            'participant_name',
            'age',
            'phone_number',
            'gender',
            'emergency_contact',
            'payment_status',
            'confirmation_status',
            'registered_at',
        ]
        read_only_fields = fields
