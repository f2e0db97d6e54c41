"""
Registrations app services layer.

All state-changing operations keep the ledger and the camps'
participant counters in one transaction.
"""

from .exceptions import (
    RegistrationsServiceError,
    MissingCampError,
    InvalidIdentifierError,
    CampNotFoundError,
    RegistrationNotFoundError,
    NotRegistrationOwnerError,
    RegistrationAlreadyPaidError,
)

from .registration_management import (
    register_for_camp,
    cancel_registration,
    get_registration,
    list_registrations,
)

from .reconciliation import (
    CountDrift,
    reconcile_participant_counts,
)


__all__ = [
    # Exceptions
    'RegistrationsServiceError',
    'MissingCampError',
    'InvalidIdentifierError',
    'CampNotFoundError',
    'RegistrationNotFoundError',
    'NotRegistrationOwnerError',
    'RegistrationAlreadyPaidError',

    # Registration Management
    'register_for_camp',
    'cancel_registration',
    'get_registration',
    'list_registrations',

    # Reconciliation
    'CountDrift',
    'reconcile_participant_counts',
]
