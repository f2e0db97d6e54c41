# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import User, Role


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin interface for application users.

    Organizers are granted here (or with ``manage.py set_role``); the API
    never lets a client pick its own role.
    """

    list_display = [
        'email',
        'name',
        'role_badge',
        'created_at',
        'last_signin_time',
    ]

    list_filter = [
        'role',
        'created_at',
    ]

    search_fields = [
        'email',
        'name',
    ]

    ordering = ['-created_at']
    readonly_fields = ['id', 'created_at', 'last_signin_time']
    actions = ['make_organizer', 'make_participant']

    def role_badge(self, obj):
        """Display role as colored badge."""
        if obj.is_organizer:
            bg, fg = '#2E6F9E', 'white'
        else:
            bg, fg = '#E0E0E0', '#333'
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.effective_role
        )
    role_badge.short_description = 'Role'

    @admin.action(description='Grant organizer role')
    def make_organizer(self, request, queryset):
        updated = queryset.update(role=Role.ORGANIZER)
        self.message_user(request, f'{updated} user(s) are now organizers.')

    @admin.action(description='Revoke organizer role')
    def make_participant(self, request, queryset):
        updated = queryset.update(role=Role.PARTICIPANT)
        self.message_user(request, f'{updated} user(s) are now participants.')
