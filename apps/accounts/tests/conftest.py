import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User, Role
from apps.accounts.verifiers import issue_access_token


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a user without an explicit role."""
    return User.objects.create(
        email='testuser@example.com',
        name='Test User',
        photo='https://example.com/test.png',
    )


@pytest.fixture
def organizer(db):
    """Create and return an organizer."""
    return User.objects.create(
        email='organizer@example.com',
        name='Camp Organizer',
        role=Role.ORGANIZER,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client carrying a verified credential for ``user``."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_access_token(user.email)}')
    return api_client


@pytest.fixture
def organizer_client(organizer):
    """Return an API client carrying a verified credential for ``organizer``."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_access_token(organizer.email)}')
    return client
