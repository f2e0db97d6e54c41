# ==========================================
# apps/registrations/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Registration, PaymentStatus


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    """
    Admin interface for registrations (read-only).

    Registrations are created and cancelled through the API only, so the
    camps' participant counters stay in step with the ledger.
    """

    list_display = [
        'email',
        'participant_name',
        'camp_name',
        'fees',
        'status_badge',
        'confirmation_status',
        'registered_at',
    ]

    list_filter = [
        'payment_status',
        'confirmation_status',
        'registered_at',
    ]

    search_fields = [
        'email',
        'participant_name',
        'camp_name',
    ]

    ordering = ['-registered_at']

    def status_badge(self, obj):
        """Display payment status as colored badge."""
        colors = {
            PaymentStatus.UNPAID: ('#E5C49A', '#2C1810'),
            PaymentStatus.PAID: ('#6B8E5E', 'white'),
        }
        bg, fg = colors.get(obj.payment_status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_payment_status_display()
        )
    status_badge.short_description = 'Payment'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
