from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsVerifiedIdentity, scoped_email

from .serializers import (
    PaymentIntentSerializer,
    PaymentIntentResponseSerializer,
    PaymentCreateSerializer,
    PaymentFilterSerializer,
    PaymentSerializer,
)
from .services import (
    create_payment_intent,
    record_payment,
    list_payments,
    InvalidPaymentError,
    InvalidIdentifierError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    AlreadyPaidError,
    PaymentProviderError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


ERROR_STATUS = {
    InvalidPaymentError: status.HTTP_400_BAD_REQUEST,
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    RegistrationNotFoundError: status.HTTP_404_NOT_FOUND,
    NotRegistrationOwnerError: status.HTTP_403_FORBIDDEN,
    AlreadyPaidError: status.HTTP_409_CONFLICT,
    PaymentProviderError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(error):
    return Response({'error': str(error)}, status=ERROR_STATUS[type(error)])


@extend_schema(
    request=PaymentIntentSerializer,
    responses={
        200: PaymentIntentResponseSerializer,
        400: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Create a card PaymentIntent and return its client secret.",
    tags=['payments'],
)
@api_view(['POST'])
@permission_classes([IsVerifiedIdentity])
def payment_intent(request):
    """Create a payment intent."""
    serializer = PaymentIntentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        client_secret = create_payment_intent(**serializer.validated_data)
    except (InvalidPaymentError, PaymentProviderError) as e:
        return _error_response(e)

    return Response({'client_secret': client_secret})


@extend_schema(
    methods=['GET'],
    parameters=[PaymentFilterSerializer],
    responses={200: PaymentSerializer(many=True), 403: ErrorResponseSerializer},
    description="Payment history, newest first. Participants only see their own.",
    tags=['payments'],
)
@extend_schema(
    methods=['POST'],
    request=PaymentCreateSerializer,
    responses={
        201: PaymentSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Record a completed payment and confirm its registration.",
    tags=['payments'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsVerifiedIdentity])
def payments(request):
    """List payments or record a new payment."""
    if request.method == 'GET':
        query = PaymentFilterSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        email = scoped_email(request, query.validated_data.get('email'))
        return Response(PaymentSerializer(list_payments(email=email), many=True).data)

    serializer = PaymentCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        payment = record_payment(
            email=request.user.email,
            **serializer.validated_data
        )
    except (
        InvalidPaymentError,
        InvalidIdentifierError,
        RegistrationNotFoundError,
        NotRegistrationOwnerError,
        AlreadyPaidError,
    ) as e:
        return _error_response(e)

    return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)
