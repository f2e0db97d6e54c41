"""
Management command to repair camp participant counts.

Recomputes each camp's participant_count from its registrations. Needed
after importing data from the old backend, which updated the counter and
the registrations separately.

Usage:
    python manage.py recount_participants
    python manage.py recount_participants --dry-run
"""

from django.core.management.base import BaseCommand

from apps.registrations.services import reconcile_participant_counts


class Command(BaseCommand):
    help = 'Recompute camp participant counts from registrations'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be updated without making changes',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        drifts = reconcile_participant_counts(dry_run=dry_run)

        if not drifts:
            self.stdout.write(
                self.style.SUCCESS('All participant counts match registrations.')
            )
            return

        self.stdout.write(f'\nFound {len(drifts)} camp(s) with a wrong count:\n')
        for drift in drifts:
            self.stdout.write(
                f'  - {drift.camp_name} | stored: {drift.stored} | actual: {drift.actual}'
            )

        if dry_run:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f'\nCorrected {len(drifts)} camp(s).')
        )
