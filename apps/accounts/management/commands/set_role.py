"""
Management command to grant or revoke the organizer role.

Usage:
    python manage.py set_role alice@example.com organizer
    python manage.py set_role alice@example.com participant
"""

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import Role
from apps.accounts.services import set_role, AccountsServiceError


class Command(BaseCommand):
    help = 'Set the role (organizer/participant) of an existing user'

    def add_arguments(self, parser):
        parser.add_argument('email', help='Email of the user')
        parser.add_argument('role', choices=Role.values, help='Role to assign')

    def handle(self, *args, **options):
        try:
            user = set_role(email=options['email'], role=options['role'])
        except AccountsServiceError as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(f'{user.email} is now {user.effective_role}.')
        )
