from django.contrib import admin
from .models import Feedback


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ['email', 'name', 'rating', 'short_content', 'created_at']
    list_filter = ['rating', 'created_at']
    search_fields = ['email', 'name', 'content']
    ordering = ['-created_at']

    def short_content(self, obj):
        return obj.content[:60]
    short_content.short_description = 'Content'
