"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 4 users (one organizer, three participants)
- 8 camps
- Registrations made through the registration service
- A recorded payment for one of them
- Feedback
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, Role
from apps.camps.models import Camp
from apps.camps.services import create_camp
from apps.feedbacks.models import Feedback
from apps.feedbacks.services import create_feedback
from apps.payments.models import Payment
from apps.payments.services import record_payment
from apps.registrations.models import Registration
from apps.registrations.services import register_for_camp


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        camps = self.create_camps(users['organizer'])
        registrations = self.create_registrations(users, camps)
        self.create_payments(registrations)
        self.create_feedbacks(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Accounts (get a token with `manage.py issue_dev_token <email>`):')
        for user in users.values():
            self.stdout.write(f'  {user.email} ({user.effective_role})')

    def clear_data(self):
        """Clear all data from the database (children first)."""
        Payment.objects.all().delete()
        Registration.objects.all().delete()
        Camp.objects.all().delete()
        Feedback.objects.all().delete()
        User.objects.all().delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        organizer, _ = User.objects.get_or_create(
            email='organizer@example.com',
            defaults={'name': 'Dr. Organizer', 'role': Role.ORGANIZER}
        )

        participants = {}
        for key, name in [('alice', 'Alice Ahmed'), ('bob', 'Bob Biswas'), ('charlie', 'Charlie Chowdhury')]:
            participants[key], _ = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={'name': name}
            )

        return {'organizer': organizer, **participants}

    def create_camps(self, organizer):
        self.stdout.write('  Creating camps...')

        camps_data = [
            ('Free Eye Checkup', 'Dhaka Community Center', 'Dr. Rahman', Decimal('0.00')),
            ('Dental Care Day', 'Sylhet Town Hall', 'Dr. Karim', Decimal('15.00')),
            ('Diabetes Screening', 'Narayanganj Clinic', 'Dr. Hossain', Decimal('40.00')),
            ('Child Vaccination', 'Gazipur School', 'Dr. Akter', Decimal('30.00')),
            ('Blood Donation Drive', 'Comilla Stadium', 'Dr. Sen', Decimal('0.00')),
            ('Heart Health Camp', 'Chittagong Hospital', 'Dr. Das', Decimal('55.00')),
            ('Skin Care Clinic', 'Rajshahi University', 'Dr. Nahar', Decimal('20.00')),
            ('Women Health Day', 'Khulna Civic Center', 'Dr. Begum', Decimal('25.00')),
        ]

        camps = []
        for i, (name, location, professional, fees) in enumerate(camps_data):
            camp = Camp.objects.filter(name=name).first()
            if camp is None:
                camp = create_camp(
                    created_by=organizer.email,
                    name=name,
                    location=location,
                    healthcare_professional=professional,
                    fees=fees,
                    scheduled_at=timezone.now() + timedelta(days=7 * (i + 1)),
                    description=f'{name} run by {professional}.',
                )
            camps.append(camp)

        return camps

    def create_registrations(self, users, camps):
        self.stdout.write('  Creating registrations...')

        plan = [
            ('alice', 1), ('alice', 2),
            ('bob', 1), ('bob', 3),
            ('charlie', 1), ('charlie', 5),
        ]

        registrations = []
        for key, camp_index in plan:
            user = users[key]
            camp = camps[camp_index]
            if Registration.objects.filter(camp=camp, email=user.email).exists():
                continue
            registrations.append(register_for_camp(
                camp_id=camp.id,
                email=user.email,
                participant_name=user.name,
                age=30,
            ))

        return registrations

    def create_payments(self, registrations):
        self.stdout.write('  Creating payments...')

        for registration in registrations[:1]:
            record_payment(
                registration_id=registration.id,
                email=registration.email,
                amount=registration.fees or Decimal('1.00'),
                payment_method='card',
                transaction_id=f'pi_sample_{registration.id.hex[:12]}',
            )

    def create_feedbacks(self, users):
        self.stdout.write('  Creating feedback...')

        for key, rating, content in [
            ('alice', 5, 'The doctors were kind and the queue moved fast.'),
            ('bob', 4, 'Well organised, parking was hard to find.'),
        ]:
            user = users[key]
            if not Feedback.objects.filter(email=user.email).exists():
                create_feedback(email=user.email, name=user.name, rating=rating, content=content)
