from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema

from .permissions import IsVerifiedIdentity
from .serializers import (
    UserSerializer,
    UserCreateSerializer,
    SignInTimeSerializer,
    ProfileUpdateSerializer,
    RoleQuerySerializer,
    RoleResponseSerializer,
)
from .services import (
    create_user_if_absent,
    touch_sign_in,
    update_profile,
    get_role,
    UserNotFoundError,
    InvalidProfileUpdateError,
)


# Response serializers for API documentation
class UserCreatedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    inserted = serializers.BooleanField()
    user = UserSerializer()


class UpdateCountResponseSerializer(serializers.Serializer):
    matched_count = serializers.IntegerField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=UserCreateSerializer,
    responses={
        200: UserCreatedResponseSerializer,
        201: UserCreatedResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Save a user on first sign-in. Idempotent per email.",
    tags=['users'],
)
@api_view(['POST', 'PATCH'])
@authentication_classes([])
@permission_classes([AllowAny])
def users(request):
    """
    POST  - save user on first sign-in
    PATCH - record last sign-in time
    """
    if request.method == 'PATCH':
        return _update_signin_time(request)

    serializer = UserCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user, created = create_user_if_absent(**serializer.validated_data)

    if not created:
        return Response({
            'message': 'user already exists',
            'inserted': False,
            'user': UserSerializer(user).data,
        })

    return Response({
        'message': 'user created',
        'inserted': True,
        'user': UserSerializer(user).data,
    }, status=status.HTTP_201_CREATED)


def _update_signin_time(request):
    serializer = SignInTimeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    matched = touch_sign_in(
        email=serializer.validated_data['email'],
        timestamp=serializer.validated_data.get('last_signin_time') or timezone.now(),
    )
    return Response({'matched_count': matched})


@extend_schema(
    request=ProfileUpdateSerializer,
    responses={
        200: UpdateCountResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update a user's name and/or photo. Only supplied fields change.",
    tags=['users'],
)
@api_view(['PATCH'])
@authentication_classes([])
@permission_classes([AllowAny])
def profile_update(request):
    """Update user profile information."""
    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        matched = update_profile(
            email=serializer.validated_data.get('email'),
            name=serializer.validated_data.get('name'),
            photo=serializer.validated_data.get('photo'),
        )
    except InvalidProfileUpdateError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({'matched_count': matched})


@extend_schema(
    responses={
        200: RoleResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Get a user's role. Users without a role are participants.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsVerifiedIdentity])
def user_role(request, email=None):
    """Get user role by path parameter or ``?email=``."""
    query = RoleQuerySerializer(data={'email': email or request.query_params.get('email')})
    if not query.is_valid():
        return Response(
            {'error': 'Email is required'},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        role = get_role(email=query.validated_data['email'])
    except UserNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response({'role': role})
