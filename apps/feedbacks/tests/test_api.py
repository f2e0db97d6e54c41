import pytest
from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.feedbacks.models import Feedback
from apps.feedbacks.services import create_feedback, EmptyFeedbackError


@pytest.mark.django_db
class TestCreateFeedback:
    """Tests for POST /feedbacks"""

    def test_create_feedback(self, participant_client, participant):
        data = {
            'content': 'Very well organised camp.',
            'rating': 5,
            'name': participant.name,
            'photo': participant.photo,
        }
        response = participant_client.post(reverse('feedbacks:feedbacks'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['email'] == participant.email
        assert response.data['rating'] == 5
        assert Feedback.objects.count() == 1

    def test_client_timestamp_is_ignored(self, participant_client):
        data = {
            'content': 'Backdated',
            'createdAt': '2001-01-01T00:00:00Z',
            'created_at': '2001-01-01T00:00:00Z',
        }
        before = timezone.now()
        response = participant_client.post(reverse('feedbacks:feedbacks'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Feedback.objects.get().created_at >= before

    def test_rating_out_of_range(self, participant_client):
        data = {'content': 'Too good', 'rating': 6}
        response = participant_client.post(reverse('feedbacks:feedbacks'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'rating' in response.data['fields']

    def test_blank_content(self, participant_client):
        response = participant_client.post(
            reverse('feedbacks:feedbacks'), {'content': '   '}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Feedback content is required'

    def test_without_credential(self, api_client):
        response = api_client.post(
            reverse('feedbacks:feedbacks'), {'content': 'Hi'}, format='json'
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Feedback.objects.count() == 0

    def test_with_rejected_credential(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')
        response = api_client.post(
            reverse('feedbacks:feedbacks'), {'content': 'Hi'}, format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestListFeedback:
    """Tests for GET /feedbacks"""

    def test_public_listing_newest_first(self, api_client):
        old = Feedback.objects.create(
            email='a@example.com', content='old', created_at=timezone.now() - timedelta(days=2)
        )
        new = Feedback.objects.create(email='b@example.com', content='new')

        response = api_client.get(reverse('feedbacks:feedbacks'))

        assert response.status_code == status.HTTP_200_OK
        assert [f['id'] for f in response.data] == [str(new.id), str(old.id)]

    def test_listing_ignores_bad_credential(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')
        response = api_client.get(reverse('feedbacks:feedbacks'))

        assert response.status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestFeedbackService:

    def test_create_strips_content(self):
        feedback = create_feedback(email='a@example.com', content='  Thanks!  ')
        assert feedback.content == 'Thanks!'

    def test_create_empty(self):
        with pytest.raises(EmptyFeedbackError):
            create_feedback(email='a@example.com', content='')
