import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.accounts.models import User, Role
from apps.accounts.verifiers import issue_access_token
from apps.camps.models import Camp


def client_for(email):
    """API client carrying a verified credential for ``email``."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_access_token(email)}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def organizer(db):
    return User.objects.create(
        email='organizer@example.com',
        name='Camp Organizer',
        role=Role.ORGANIZER,
    )


@pytest.fixture
def participant(db):
    return User.objects.create(
        email='participant@example.com',
        name='Camp Participant',
    )


@pytest.fixture
def organizer_client(organizer):
    return client_for(organizer.email)


@pytest.fixture
def participant_client(participant):
    return client_for(participant.email)


@pytest.fixture
def camp(db, organizer):
    """Create and return a test camp."""
    return Camp.objects.create(
        name='Free Eye Checkup',
        image='https://example.com/eye.png',
        fees=Decimal('25.00'),
        scheduled_at=timezone.now() + timedelta(days=10),
        location='Dhaka Community Center',
        healthcare_professional='Dr. Rahman',
        description='Vision screening for all ages.',
        created_by=organizer.email,
    )


@pytest.fixture
def make_camps(db):
    """
    Create ``count`` camps with strictly increasing creation times.

    ``created_at`` is auto_now_add, so it is rewritten after insert.
    """
    def _make(count, **overrides):
        base = timezone.now() - timedelta(days=count)
        camps = []
        for i in range(count):
            camp = Camp.objects.create(
                name=overrides.get('name', f'Camp {i}'),
                location='Chittagong',
                fees=Decimal('10.00'),
                participant_count=overrides.get('participant_counts', [0] * count)[i],
            )
            Camp.objects.filter(pk=camp.pk).update(created_at=base + timedelta(hours=i))
            camp.refresh_from_db()
            camps.append(camp)
        return camps
    return _make
