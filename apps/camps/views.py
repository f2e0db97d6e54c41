from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsOrganizer

from .serializers import (
    CampSerializer,
    CampWriteSerializer,
    CampPageQuerySerializer,
    PaginatedCampsSerializer,
)
from .services import (
    create_camp,
    get_camp_by_id,
    update_camp,
    delete_camp,
    list_all_camps,
    paginate_camps,
    popular_camps,
    InvalidCampIdError,
    CampNotFoundError,
    CampHasRegistrationsError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _camp_error_response(error):
    """Map a camp service error to an HTTP response."""
    if isinstance(error, InvalidCampIdError):
        return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(error, CampNotFoundError):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'error': str(error)}, status=status.HTTP_409_CONFLICT)


@extend_schema(
    request=CampWriteSerializer,
    responses={200: CampSerializer(many=True), 201: CampSerializer},
    description="GET: all camps without pagination. POST: create a camp. Organizers only.",
    tags=['camps'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsOrganizer])
def camps(request):
    """List all camps or create a new camp."""
    if request.method == 'GET':
        return Response(CampSerializer(list_all_camps(), many=True).data)

    serializer = CampWriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    camp = create_camp(
        created_by=request.user.email,
        **serializer.validated_data
    )

    return Response(CampSerializer(camp).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[CampPageQuerySerializer],
    responses={200: PaginatedCampsSerializer, 400: ErrorResponseSerializer},
    description="Camps ordered newest first, one page at a time.",
    tags=['camps'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def paginated_camps(request):
    """Get one page of camps."""
    query = CampPageQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    result = paginate_camps(**query.validated_data)

    return Response(PaginatedCampsSerializer(result).data)


@extend_schema(
    responses={200: CampSerializer(many=True)},
    description="Most popular camps by participant count.",
    tags=['camps'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def popular(request):
    """Get the most popular camps."""
    return Response(CampSerializer(popular_camps(), many=True).data)


@extend_schema(
    responses={200: CampSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Get a single camp.",
    tags=['camps'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def camp_details(request, camp_id):
    """Get single camp details by ID."""
    try:
        camp = get_camp_by_id(camp_id=camp_id)
    except (InvalidCampIdError, CampNotFoundError) as e:
        return _camp_error_response(e)

    return Response(CampSerializer(camp).data)


@extend_schema(
    request=CampWriteSerializer,
    responses={200: CampSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Update camp fields. Only supplied fields change. Organizers only.",
    tags=['camps'],
)
@api_view(['PATCH', 'PUT'])
@permission_classes([IsOrganizer])
def update_camp_view(request, camp_id):
    """Update camp information."""
    serializer = CampWriteSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    try:
        camp = update_camp(camp_id=camp_id, **serializer.validated_data)
    except (InvalidCampIdError, CampNotFoundError) as e:
        return _camp_error_response(e)

    return Response(CampSerializer(camp).data)


@extend_schema(
    responses={204: None, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
    description="Delete a camp without registrations. Organizers only.",
    tags=['camps'],
)
@api_view(['DELETE'])
@permission_classes([IsOrganizer])
def delete_camp_view(request, camp_id):
    """Delete a camp."""
    try:
        delete_camp(camp_id=camp_id)
    except (InvalidCampIdError, CampNotFoundError, CampHasRegistrationsError) as e:
        return _camp_error_response(e)

    return Response(status=status.HTTP_204_NO_CONTENT)
