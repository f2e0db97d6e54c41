"""
Participant counter.

The counter on a camp must always equal the number of registrations
referencing it. It is moved with a single ``UPDATE ... SET n = n + delta``
so concurrent registrations never lose an increment, and only from inside
the transaction that inserts or deletes the registration being counted.
"""

from uuid import UUID

from django.db import transaction
from django.db.models import F

from apps.camps.models import Camp

from .exceptions import CampNotFoundError, ParticipantCountError


def adjust_participant_count(*, camp_id: UUID, delta: int) -> None:
    """
    Atomically add ``delta`` to a camp's participant count.

    Must run inside the caller's ``transaction.atomic`` block together with
    the registration write it accounts for.

    Raises:
        ParticipantCountError: If called outside a transaction, or the
            decrement would take the counter below zero
        CampNotFoundError: If camp doesn't exist
    """
    if not transaction.get_connection().in_atomic_block:
        raise ParticipantCountError(
            "Participant count can only change together with a registration"
        )

    queryset = Camp.objects.filter(id=camp_id)
    if delta < 0:
        queryset = queryset.filter(participant_count__gte=-delta)

    updated = queryset.update(participant_count=F('participant_count') + delta)

    if updated == 0:
        if not Camp.objects.filter(id=camp_id).exists():
            raise CampNotFoundError("Camp not found")
        raise ParticipantCountError("Participant count cannot go below zero")
