"""
Camps app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    CampsServiceError,
    InvalidCampIdError,
    CampNotFoundError,
    CampHasRegistrationsError,
    InvalidPaginationError,
    ParticipantCountError,
)

from .identifiers import parse_uuid

from .camp_management import (
    create_camp,
    get_camp_by_id,
    update_camp,
    delete_camp,
)

from .camp_listing import (
    list_all_camps,
    paginate_camps,
    popular_camps,
)

from .participant_counter import (
    adjust_participant_count,
)


__all__ = [
    # Exceptions
    'CampsServiceError',
    'InvalidCampIdError',
    'CampNotFoundError',
    'CampHasRegistrationsError',
    'InvalidPaginationError',
    'ParticipantCountError',

    # Identifiers
    'parse_uuid',

    # Camp Management
    'create_camp',
    'get_camp_by_id',
    'update_camp',
    'delete_camp',

    # Listings
    'list_all_camps',
    'paginate_camps',
    'popular_camps',

    # Participant counter
    'adjust_participant_count',
]
