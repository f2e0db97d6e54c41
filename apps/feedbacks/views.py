from rest_framework import status, serializers
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsVerifiedIdentity

from .serializers import FeedbackSerializer, FeedbackCreateSerializer
from .services import create_feedback, list_feedbacks, EmptyFeedbackError


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class FeedbackView(APIView):
    """
    GET is public, POST needs a verified identity.

    Reads skip authentication entirely so a stale credential never turns
    a public listing into a 403.
    """

    def get_authenticators(self):
        if self.request is not None and self.request.method == 'GET':
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsVerifiedIdentity()]

    @extend_schema(
        responses={200: FeedbackSerializer(many=True)},
        description="All feedback, newest first.",
        tags=['feedbacks'],
    )
    def get(self, request):
        return Response(FeedbackSerializer(list_feedbacks(), many=True).data)

    @extend_schema(
        request=FeedbackCreateSerializer,
        responses={201: FeedbackSerializer, 400: ErrorResponseSerializer},
        description="Leave feedback.",
        tags=['feedbacks'],
    )
    def post(self, request):
        serializer = FeedbackCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            feedback = create_feedback(
                email=request.user.email,
                **serializer.validated_data
            )
        except EmptyFeedbackError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(FeedbackSerializer(feedback).data, status=status.HTTP_201_CREATED)
