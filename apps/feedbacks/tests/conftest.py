import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.accounts.verifiers import issue_access_token


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def participant(db):
    return User.objects.create(
        email='participant@example.com',
        name='Participant',
        photo='https://example.com/p.png',
    )


@pytest.fixture
def participant_client(participant):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_access_token(participant.email)}')
    return client
