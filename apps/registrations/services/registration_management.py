"""
Registration management service.

Register and cancel are each one transaction: the registration row and
the camp's participant counter change together. A failure at any step
rolls back both, so the counter always equals the number of
registrations referencing the camp.
"""

import logging
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.camps.models import Camp
from apps.camps.services import adjust_participant_count, parse_uuid
from apps.registrations.models import Registration

from .exceptions import (
    MissingCampError,
    InvalidIdentifierError,
    CampNotFoundError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    RegistrationAlreadyPaidError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def register_for_camp(
    *,
    camp_id=None,
    email: str,
    participant_name: str = '',
    age: Optional[int] = None,
    phone_number: str = '',
    gender: str = '',
    emergency_contact: str = ''
) -> Registration:
    """
    Register a participant for a camp.

    This operation:
    1. Locks the camp row
    2. Inserts the registration as unpaid/pending with a snapshot of the
       camp name and fees
    3. Increments the camp's participant count

    Args:
        camp_id: UUID of the camp
        email: Verified email of the participant
        participant_name: Name of the person attending
        age: Age of the person attending
        phone_number: Contact phone number
        gender: Gender as entered by the participant
        emergency_contact: Emergency contact phone number

    Returns:
        Created Registration instance

    Raises:
        MissingCampError: If camp_id is missing
        InvalidIdentifierError: If camp_id is malformed
        CampNotFoundError: If camp doesn't exist
    """
    if not camp_id:
        raise MissingCampError("camp_id is required")

    camp_uuid = parse_uuid(camp_id, error_class=InvalidIdentifierError, label='camp ID')

    try:
        camp = Camp.objects.select_for_update().get(id=camp_uuid)
    except Camp.DoesNotExist:
        raise CampNotFoundError("Camp not found")

    registration = Registration.objects.create(
        camp=camp,
        email=email,
        camp_name=camp.name,
        fees=camp.fees,
        participant_name=participant_name,
        age=age,
        phone_number=phone_number,
        gender=gender,
        emergency_contact=emergency_contact,
    )

    adjust_participant_count(camp_id=camp.id, delta=1)

    logger.info("Registration %s created for camp %s by %s", registration.id, camp.id, email)
    return registration


@transaction.atomic
def cancel_registration(
    *,
    registration_id,
    camp_id=None,
    requester_email: Optional[str] = None
) -> None:
    """
    Cancel a registration and release its camp slot.

    Args:
        registration_id: UUID of the registration
        camp_id: UUID of the camp the registration belongs to
        requester_email: Email the registration must belong to;
            None skips the ownership check (organizers)

    Raises:
        InvalidIdentifierError: If either identifier is malformed
        RegistrationNotFoundError: If no such registration exists for the camp
        NotRegistrationOwnerError: If the registration belongs to someone else
        RegistrationAlreadyPaidError: If the registration has been paid for
    """
    registration_uuid = parse_uuid(
        registration_id, error_class=InvalidIdentifierError, label='registration ID'
    )
    camp_uuid = parse_uuid(camp_id, error_class=InvalidIdentifierError, label='camp ID')

    try:
        registration = (
            Registration.objects
            .select_for_update()
            .get(id=registration_uuid, camp_id=camp_uuid)
        )
    except Registration.DoesNotExist:
        raise RegistrationNotFoundError("Registration not found")

    if requester_email is not None and registration.email != requester_email:
        raise NotRegistrationOwnerError("You can only cancel your own registrations")

    if registration.is_paid:
        raise RegistrationAlreadyPaidError("Paid registrations cannot be cancelled")

    registration.delete()
    adjust_participant_count(camp_id=camp_uuid, delta=-1)

    logger.info("Registration %s for camp %s cancelled", registration_uuid, camp_uuid)


def get_registration(*, registration_id) -> Registration:
    """
    Get a single registration (used before paying for it).

    Raises:
        InvalidIdentifierError: If registration_id is malformed
        RegistrationNotFoundError: If registration doesn't exist
    """
    registration_uuid = parse_uuid(
        registration_id, error_class=InvalidIdentifierError, label='registration ID'
    )

    try:
        return Registration.objects.select_related('camp').get(id=registration_uuid)
    except Registration.DoesNotExist:
        raise RegistrationNotFoundError("Registration not found")


def list_registrations(*, email: Optional[str] = None) -> QuerySet[Registration]:
    """
    Registrations newest first, optionally for one participant.

    Args:
        email: Only registrations of this participant; None returns all
    """
    queryset = Registration.objects.select_related('camp')
    if email is not None:
        queryset = queryset.filter(email=email)
    return queryset.order_by('-registered_at')
