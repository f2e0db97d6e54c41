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
    return User.objects.create(email='organizer@example.com', role=Role.ORGANIZER)


@pytest.fixture
def participant(db):
    return User.objects.create(email='participant@example.com', name='Participant')


@pytest.fixture
def other_participant(db):
    return User.objects.create(email='other@example.com', name='Other')


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
    return Camp.objects.create(
        name='Child Vaccination',
        fees=Decimal('30.00'),
        location='Gazipur',
    )


@pytest.fixture
def registration(camp, participant):
    return register_for_camp(camp_id=camp.id, email=participant.email)


@pytest.fixture
def payment_data(registration):
    return {
        'registration_id': str(registration.id),
        'amount': '30.00',
        'payment_method': 'card',
        'transaction_id': 'pi_3Nabc123',
    }
