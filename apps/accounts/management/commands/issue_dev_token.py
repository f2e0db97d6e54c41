"""
Management command to mint a bearer credential for local development.

The token is only accepted while ``IDENTITY_VERIFIER`` points at
``SimpleJWTIdentityVerifier``.

Usage:
    python manage.py issue_dev_token alice@example.com
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from apps.accounts.verifiers import issue_access_token


class Command(BaseCommand):
    help = 'Print a bearer token for the given email (JWT verifier only)'

    def add_arguments(self, parser):
        parser.add_argument('email', help='Email to embed in the token')

    def handle(self, *args, **options):
        if not settings.IDENTITY_VERIFIER.endswith('SimpleJWTIdentityVerifier'):
            self.stderr.write(
                self.style.WARNING(
                    f'IDENTITY_VERIFIER is {settings.IDENTITY_VERIFIER}; '
                    'this token will be rejected.'
                )
            )

        self.stdout.write(issue_access_token(options['email']))
