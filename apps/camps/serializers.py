from django.conf import settings
from rest_framework import serializers
from .models import Camp


# =============================================================================
# Input Serializers
# =============================================================================

class CampPageQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the paginated listing.

    Query Parameters:
        page (int): 1-based page number, default 1
        limit (int): Page size, default CAMPS_PAGE_SIZE
    """

    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False)

    def validate(self, attrs):
        attrs.setdefault('limit', settings.CAMPS_PAGE_SIZE)
        return attrs


class CampWriteSerializer(serializers.ModelSerializer):
    """Serializer for creating and updating camps."""

    class Meta:
        model = Camp
        fields = [
            'name',
            'image',
            'fees',
            'scheduled_at',
            'location',
            'healthcare_professional',
            'description',
        ]


# =============================================================================
# Output Serializers
# =============================================================================

class CampSerializer(serializers.ModelSerializer):
    """Main serializer for camps."""

    class Meta:
        model = Camp
        fields = [
            'id',
            'name',
            'image',
            'fees',
            'scheduled_at',
            'location',
            'healthcare_professional',
            'description',
            'participant_count',
            'created_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PaginatedCampsSerializer(serializers.Serializer):
    """Serializer for one page of camps. Page fields are camelCase on the wire."""

    camps = CampSerializer(many=True)
    totalPages = serializers.IntegerField(source='total_pages')
    currentPage = serializers.IntegerField(source='current_page')
    totalCount = serializers.IntegerField(source='total_count')
