# ==========================================
# apps/camps/admin.py
# ==========================================

from django.contrib import admin
from .models import Camp


@admin.register(Camp)
class CampAdmin(admin.ModelAdmin):
    """
    Admin interface for camps.

    The participant counter is read-only here; it only moves together
    with registrations.
    """

    list_display = [
        'name',
        'location',
        'scheduled_at',
        'fees',
        'participant_count',
        'created_by',
        'created_at',
    ]

    list_filter = [
        'scheduled_at',
        'created_at',
    ]

    search_fields = [
        'name',
        'location',
        'healthcare_professional',
    ]

    ordering = ['-created_at']
    readonly_fields = ['id', 'participant_count', 'created_by', 'created_at', 'updated_at']
