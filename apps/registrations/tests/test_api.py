import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.camps.models import Camp
from apps.registrations.models import Registration, PaymentStatus, ConfirmationStatus


# =============================================================================
# Register Tests
# =============================================================================

@pytest.mark.django_db
class TestCampRegistration:
    """Tests for POST /camp-registration"""

    def test_register_success(self, participant_client, participant, camp):
        url = reverse('registrations:create')
        data = {
            'camp_id': str(camp.id),
            'participant_name': 'Participant',
            'age': 34,
            'phone_number': '+8801700000000',
            'gender': 'female',
            'emergency_contact': '+8801800000000',
        }
        response = participant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['email'] == participant.email
        assert response.data['payment_status'] == 'unpaid'
        assert response.data['confirmation_status'] == 'pending'
        assert response.data['camp_name'] == camp.name

        camp.refresh_from_db()
        assert camp.participant_count == 1

    def test_register_uses_credential_email(self, participant_client, participant, camp):
        """The email in the body cannot register someone else."""
        url = reverse('registrations:create')
        data = {'camp_id': str(camp.id), 'email': 'victim@example.com'}
        response = participant_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Registration.objects.get(id=response.data['id']).email == participant.email

    def test_register_missing_camp(self, participant_client):
        url = reverse('registrations:create')
        response = participant_client.post(url, {'participant_name': 'X'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'camp_id is required'

    def test_register_invalid_camp_id(self, participant_client):
        url = reverse('registrations:create')
        response = participant_client.post(url, {'camp_id': 'xyz'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_unknown_camp(self, participant_client):
        url = reverse('registrations:create')
        response = participant_client.post(url, {'camp_id': str(uuid4())}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Registration.objects.count() == 0

    def test_register_without_credential(self, api_client, camp):
        url = reverse('registrations:create')
        response = api_client.post(url, {'camp_id': str(camp.id)}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        camp.refresh_from_db()
        assert camp.participant_count == 0


# =============================================================================
# Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistrationListing:
    """Tests for GET /camps-registered, /registered-camps, /registered-camp/{id}"""

    def test_all_registrations_as_organizer(self, organizer_client, registration):
        response = organizer_client.get(reverse('registrations:list-all'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    def test_all_registrations_as_participant(self, participant_client, registration):
        response = participant_client.get(reverse('registrations:list-all'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_own_registrations(self, participant_client, registration, camp, other_participant):
        Registration.objects.create(camp=camp, email=other_participant.email, camp_name=camp.name)

        response = participant_client.get(reverse('registrations:list-mine'))

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(registration.id)]

    def test_own_registrations_with_own_email(self, participant_client, participant, registration):
        response = participant_client.get(
            reverse('registrations:list-mine'), {'email': participant.email}
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    def test_someone_elses_registrations(self, other_client, participant, registration):
        response = other_client.get(
            reverse('registrations:list-mine'), {'email': participant.email}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_organizer_reads_any_participant(self, organizer_client, participant, registration):
        response = organizer_client.get(
            reverse('registrations:list-mine'), {'email': participant.email}
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    def test_registered_camp_detail(self, participant_client, registration):
        url = reverse('registrations:detail', kwargs={'registration_id': registration.id})
        response = participant_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['fees'] == '40.00'

    def test_registered_camp_detail_of_someone_else(self, other_client, registration):
        url = reverse('registrations:detail', kwargs={'registration_id': registration.id})
        response = other_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_registered_camp_detail_invalid_id(self, participant_client):
        url = reverse('registrations:detail', kwargs={'registration_id': 'nope'})
        response = participant_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_registered_camp_detail_not_found(self, participant_client):
        url = reverse('registrations:detail', kwargs={'registration_id': uuid4()})
        response = participant_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Cancel Tests
# =============================================================================

@pytest.mark.django_db
class TestCancelRegistration:
    """Tests for DELETE /cancel-registration/{id}?campId="""

    def _url(self, registration_id, camp_id=None):
        url = reverse('registrations:cancel', kwargs={'registration_id': registration_id})
        if camp_id is not None:
            url = f'{url}?campId={camp_id}'
        return url

    def test_cancel_own_registration(self, participant_client, registration, camp):
        response = participant_client.delete(self._url(registration.id, camp.id))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        camp.refresh_from_db()
        assert camp.participant_count == 0

    def test_cancel_with_snake_case_camp_id(self, participant_client, registration, camp):
        url = reverse('registrations:cancel', kwargs={'registration_id': registration.id})
        response = participant_client.delete(f'{url}?camp_id={camp.id}')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        camp.refresh_from_db()
        assert camp.participant_count == 0

    def test_organizer_cancels_any(self, organizer_client, registration, camp):
        response = organizer_client.delete(self._url(registration.id, camp.id))

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_cancel_someone_elses(self, other_client, registration, camp):
        response = other_client.delete(self._url(registration.id, camp.id))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        camp.refresh_from_db()
        assert camp.participant_count == 1

    def test_cancel_without_camp_id(self, participant_client, registration, camp):
        response = participant_client.delete(self._url(registration.id))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        camp.refresh_from_db()
        assert camp.participant_count == 1

    def test_cancel_invalid_id(self, participant_client, registration, camp):
        response = participant_client.delete(self._url('bad-id', camp.id))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        camp.refresh_from_db()
        assert camp.participant_count == 1

    def test_cancel_not_found(self, participant_client, registration, camp):
        response = participant_client.delete(self._url(uuid4(), camp.id))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        camp.refresh_from_db()
        assert camp.participant_count == 1

    def test_cancel_paid(self, participant_client, registration, camp):
        Registration.objects.filter(id=registration.id).update(
            payment_status=PaymentStatus.PAID,
            confirmation_status=ConfirmationStatus.CONFIRMED,
        )
        response = participant_client.delete(self._url(registration.id, camp.id))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Registration.objects.filter(id=registration.id).exists()

    def test_cancel_without_credential(self, api_client, registration, camp):
        response = api_client.delete(self._url(registration.id, camp.id))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
