from rest_framework import serializers
from .models import User

# Firebase reports sign-in times as RFC 1123 strings
SIGNIN_TIME_FORMATS = ['iso-8601', '%a, %d %b %Y %H:%M:%S %Z']


class UserSerializer(serializers.ModelSerializer):
    """User profile as returned to clients."""

    role = serializers.CharField(source='effective_role', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'photo',
            'role',
            'created_at',
            'last_signin_time',
        ]
        read_only_fields = fields


# =============================================================================
# Input Serializers
# =============================================================================

class UserCreateSerializer(serializers.Serializer):
    """
    Validate first sign-in payload.

    Any ``role`` sent by the client is ignored; roles are granted by
    organizers only.
    """

    email = serializers.EmailField()
    name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    photo = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    last_signin_time = serializers.DateTimeField(
        required=False,
        allow_null=True,
        input_formats=SIGNIN_TIME_FORMATS
    )


class SignInTimeSerializer(serializers.Serializer):
    """Validate sign-in time update."""

    email = serializers.EmailField()
    last_signin_time = serializers.DateTimeField(
        required=False,
        input_formats=SIGNIN_TIME_FORMATS
    )


class ProfileUpdateSerializer(serializers.Serializer):
    """
    Validate profile update.

    Presence rules (email required, at least one of name/photo) are
    enforced by the service.
    """

    email = serializers.EmailField(required=False, allow_blank=True)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    photo = serializers.URLField(max_length=500, required=False, allow_blank=True)


class RoleQuerySerializer(serializers.Serializer):
    email = serializers.EmailField()


class RoleResponseSerializer(serializers.Serializer):
    role = serializers.CharField()
