from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import (
    IsOrganizer,
    IsVerifiedIdentity,
    is_organizer,
    scoped_email,
    ensure_owner_or_organizer,
)

from .serializers import (
    RegistrationSerializer,
    RegistrationCreateSerializer,
    RegistrationFilterSerializer,
)
from .services import (
    register_for_camp,
    cancel_registration,
    get_registration,
    list_registrations,
    MissingCampError,
    InvalidIdentifierError,
    CampNotFoundError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    RegistrationAlreadyPaidError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


ERROR_STATUS = {
    MissingCampError: status.HTTP_400_BAD_REQUEST,
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    CampNotFoundError: status.HTTP_404_NOT_FOUND,
    RegistrationNotFoundError: status.HTTP_404_NOT_FOUND,
    NotRegistrationOwnerError: status.HTTP_403_FORBIDDEN,
    RegistrationAlreadyPaidError: status.HTTP_409_CONFLICT,
}


def _error_response(error):
    return Response({'error': str(error)}, status=ERROR_STATUS[type(error)])


@extend_schema(
    request=RegistrationCreateSerializer,
    responses={
        201: RegistrationSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Register the caller for a camp and take one participant slot.",
    tags=['registrations'],
)
@api_view(['POST'])
@permission_classes([IsVerifiedIdentity])
def camp_registration(request):
    """Register for a camp."""
    serializer = RegistrationCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        registration = register_for_camp(
            email=request.user.email,
            **serializer.validated_data
        )
    except (MissingCampError, InvalidIdentifierError, CampNotFoundError) as e:
        return _error_response(e)

    return Response(
        RegistrationSerializer(registration).data,
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    responses={200: RegistrationSerializer(many=True)},
    description="All registrations, newest first. Organizers only.",
    tags=['registrations'],
)
@api_view(['GET'])
@permission_classes([IsOrganizer])
def all_registrations(request):
    """Get every registration."""
    return Response(RegistrationSerializer(list_registrations(), many=True).data)


@extend_schema(
    parameters=[OpenApiParameter('email', str, description='Participant email (organizers only for others)')],
    responses={200: RegistrationSerializer(many=True), 403: ErrorResponseSerializer},
    description="Registrations of one participant, newest first.",
    tags=['registrations'],
)
@api_view(['GET'])
@permission_classes([IsVerifiedIdentity])
def registered_camps(request):
    """Get registrations by participant email."""
    query = RegistrationFilterSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    email = scoped_email(request, query.validated_data.get('email'))
    # Organizers without a filter look at their own registrations here
    if email is None:
        email = request.user.email

    return Response(RegistrationSerializer(list_registrations(email=email), many=True).data)


@extend_schema(
    responses={
        200: RegistrationSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Get a single registration, e.g. before paying for it.",
    tags=['registrations'],
)
@api_view(['GET'])
@permission_classes([IsVerifiedIdentity])
def registered_camp(request, registration_id):
    """Get one registration."""
    try:
        registration = get_registration(registration_id=registration_id)
    except (InvalidIdentifierError, RegistrationNotFoundError) as e:
        return _error_response(e)

    ensure_owner_or_organizer(request, registration.email)

    return Response(RegistrationSerializer(registration).data)


@extend_schema(
    parameters=[OpenApiParameter('campId', str, required=True, description='Camp of the registration (``camp_id`` is also accepted)')],
    responses={
        204: None,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Cancel an unpaid registration and release its camp slot.",
    tags=['registrations'],
)
@api_view(['DELETE'])
@permission_classes([IsVerifiedIdentity])
def cancel_registration_view(request, registration_id):
    """Cancel a registration."""
    requester_email = None if is_organizer(request.user) else request.user.email

    try:
        cancel_registration(
            registration_id=registration_id,
            camp_id=request.query_params.get('campId') or request.query_params.get('camp_id'),
            requester_email=requester_email,
        )
    except (
        InvalidIdentifierError,
        RegistrationNotFoundError,
        NotRegistrationOwnerError,
        RegistrationAlreadyPaidError,
    ) as e:
        return _error_response(e)

    return Response(status=status.HTTP_204_NO_CONTENT)
