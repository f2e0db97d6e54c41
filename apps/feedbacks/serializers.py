from rest_framework import serializers
from .models import Feedback


class FeedbackCreateSerializer(serializers.Serializer):
    """Validate feedback submission. The author email comes from the credential."""

    content = serializers.CharField(allow_blank=True)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    photo = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False, allow_null=True)


class FeedbackSerializer(serializers.ModelSerializer):

    class Meta:
        model = Feedback
        fields = [
            'id',
            'email',
            'name',
            'photo',
            'rating',
            'content',
            'created_at',
        ]
        read_only_fields = fields
