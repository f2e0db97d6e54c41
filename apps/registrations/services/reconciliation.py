"""
Participant count reconciliation.

Recomputes every camp's counter from the ledger. Used to repair data
imported from systems that did not keep the two in step.
"""

import logging
from typing import List, NamedTuple
from uuid import UUID

from django.db import transaction
from django.db.models import Count

from apps.camps.models import Camp

logger = logging.getLogger(__name__)


class CountDrift(NamedTuple):
    camp_id: UUID
    camp_name: str
    stored: int
    actual: int


@transaction.atomic
def reconcile_participant_counts(*, dry_run: bool = False) -> List[CountDrift]:
    """
    Find (and unless ``dry_run``, fix) camps whose counter drifted.

    Returns:
        One CountDrift per camp whose stored count was wrong
    """
    camps = (
        Camp.objects
        .annotate(actual=Count('registrations'))
        .order_by('created_at')
    )

    drifts = [
        CountDrift(camp.id, camp.name, camp.participant_count, camp.actual)
        for camp in camps
        if camp.participant_count != camp.actual
    ]

    if not dry_run:
        for drift in drifts:
            Camp.objects.filter(id=drift.camp_id).update(participant_count=drift.actual)
            logger.warning(
                "Participant count of camp %s corrected from %s to %s",
                drift.camp_id, drift.stored, drift.actual
            )

    return drifts
