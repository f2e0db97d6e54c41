"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserNotFoundError,
    InvalidProfileUpdateError,
    InvalidRoleError,
)
from .user_management import (
    create_user_if_absent,
    touch_sign_in,
    update_profile,
    get_role,
    set_role,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserNotFoundError',
    'InvalidProfileUpdateError',
    'InvalidRoleError',
    # Services
    'create_user_if_absent',
    'touch_sign_in',
    'update_profile',
    'get_role',
    'set_role',
]
