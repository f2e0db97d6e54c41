# ==========================================
# apps/payments/admin.py
# ==========================================

from django.contrib import admin
from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin interface for the payment ledger (read-only)."""

    list_display = [
        'email',
        'camp_name',
        'amount',
        'currency',
        'payment_method',
        'transaction_id',
        'paid_at',
    ]

    list_filter = [
        'currency',
        'payment_method',
        'paid_at',
    ]

    search_fields = [
        'email',
        'camp_name',
        'transaction_id',
    ]

    readonly_fields = [
        'id',
        'registration',
        'camp',
        'camp_name',
        'email',
        'amount',
        'currency',
        'payment_method',
        'transaction_id',
        'paid_at',
    ]

    ordering = ['-paid_at']

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
