"""
Camp management service.

Create, read, update and delete operations on camp listings.
"""

import logging

from django.db import transaction
from django.db.models import ProtectedError

from apps.camps.models import Camp

from .exceptions import (
    InvalidCampIdError,
    CampNotFoundError,
    CampHasRegistrationsError,
)
from .identifiers import parse_uuid

logger = logging.getLogger(__name__)

# Fields a client may set; the counter and timestamps are server-managed
EDITABLE_FIELDS = (
    'name',
    'image',
    'fees',
    'scheduled_at',
    'location',
    'healthcare_professional',
    'description',
)


@transaction.atomic
def create_camp(*, created_by: str, **fields) -> Camp:
    """
    Create a camp listing.

    Args:
        created_by: Email of the organizer creating the camp
        **fields: Camp fields (see EDITABLE_FIELDS)

    Returns:
        Created Camp instance
    """
    data = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}
    camp = Camp.objects.create(created_by=created_by, **data)

    logger.info("Camp %s created by %s", camp.id, created_by)
    return camp


def get_camp_by_id(*, camp_id) -> Camp:
    """
    Get a single camp.

    Raises:
        InvalidCampIdError: If camp_id is malformed
        CampNotFoundError: If camp doesn't exist
    """
    camp_uuid = parse_uuid(camp_id, error_class=InvalidCampIdError, label='camp ID')

    try:
        return Camp.objects.get(id=camp_uuid)
    except Camp.DoesNotExist:
        raise CampNotFoundError("Camp not found")


@transaction.atomic
def update_camp(*, camp_id, **changes) -> Camp:
    """
    Merge the supplied fields into a camp and stamp ``updated_at``.

    Unknown or server-managed keys are ignored.

    Raises:
        InvalidCampIdError: If camp_id is malformed
        CampNotFoundError: If camp doesn't exist
    """
    camp_uuid = parse_uuid(camp_id, error_class=InvalidCampIdError, label='camp ID')

    try:
        camp = Camp.objects.select_for_update().get(id=camp_uuid)
    except Camp.DoesNotExist:
        raise CampNotFoundError("Camp not found")

    update_fields = []
    for key, value in changes.items():
        if key in EDITABLE_FIELDS:
            setattr(camp, key, value)
            update_fields.append(key)

    camp.save(update_fields=update_fields + ['updated_at'])

    logger.info("Camp %s updated (%s)", camp.id, ', '.join(update_fields) or 'no fields')
    return camp


@transaction.atomic
def delete_camp(*, camp_id) -> None:
    """
    Delete a camp.

    A camp that still has registrations cannot be deleted; they have to be
    cancelled first so no registration is left pointing at nothing.

    Raises:
        InvalidCampIdError: If camp_id is malformed
        CampNotFoundError: If camp doesn't exist
        CampHasRegistrationsError: If registrations reference the camp
    """
    camp_uuid = parse_uuid(camp_id, error_class=InvalidCampIdError, label='camp ID')

    try:
        camp = Camp.objects.select_for_update().get(id=camp_uuid)
    except Camp.DoesNotExist:
        raise CampNotFoundError("Camp not found")

    if camp.registrations.exists():
        raise CampHasRegistrationsError(
            "Camp has active registrations. Cancel them before deleting the camp."
        )

    try:
        camp.delete()
    except ProtectedError:
        # A registration slipped in after the check above
        raise CampHasRegistrationsError(
            "Camp has active registrations. Cancel them before deleting the camp."
        )

    logger.info("Camp %s deleted", camp_uuid)
