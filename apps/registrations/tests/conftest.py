import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import User, Role
from apps.accounts.verifiers import issue_access_token
from apps.camps.models import Camp
from apps.registrations.services import register_for_camp


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
    return User.objects.create(email='participant@example.com', name='Participant')


@pytest.fixture
def other_participant(db):
    return User.objects.create(email='other@example.com', name='Other Participant')


@pytest.fixture
def organizer_client(organizer):
    return client_for(organizer.email)


@pytest.fixture
def participant_client(participant):
    return client_for(participant.email)


@pytest.fixture
def other_client(other_participant):
    return client_for(other_participant.email)


@pytest.fixture
def camp(db):
    """Create and return a test camp."""
    return Camp.objects.create(
        name='Diabetes Screening',
        fees=Decimal('40.00'),
        location='Narayanganj',
        healthcare_professional='Dr. Hossain',
    )


@pytest.fixture
def registration(camp, participant):
    """A registration made through the service, so the counter is 1."""
    return register_for_camp(
        camp_id=camp.id,
        email=participant.email,
        participant_name='Participant',
        age=34,
    )
