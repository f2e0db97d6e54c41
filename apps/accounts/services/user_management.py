"""
User management service.

Sign-in bookkeeping, profile updates and role lookups for the role store.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from django.db import transaction, IntegrityError

from apps.accounts.models import User, Role

from .exceptions import (
    UserNotFoundError,
    InvalidProfileUpdateError,
    InvalidRoleError,
)

logger = logging.getLogger(__name__)


def create_user_if_absent(
    *,
    email: str,
    name: str = '',
    photo: str = '',
    last_signin_time: Optional[datetime] = None
) -> Tuple[User, bool]:
    """
    Create a user on first sign-in.

    Idempotent: if a user with this email already exists nothing is
    written. Concurrent first sign-ins for the same email are resolved by
    the unique constraint on ``email``; the loser gets the winner's row.

    Args:
        email: Verified email of the user
        name: Display name
        photo: Photo URL
        last_signin_time: Sign-in time reported by the identity provider

    Returns:
        (user, created) tuple, ``created`` is False when the user already existed
    """
    existing = User.objects.filter(email=email).first()
    if existing is not None:
        return existing, False

    try:
        with transaction.atomic():
            user = User.objects.create(
                email=email,
                name=name,
                photo=photo,
                last_signin_time=last_signin_time,
            )
    except IntegrityError:
        # Lost the race against another first sign-in
        return User.objects.get(email=email), False

    logger.info("Created user %s", email)
    return user, True


def touch_sign_in(*, email: str, timestamp: datetime) -> int:
    """
    Record the latest sign-in time.

    Unknown emails are not an error; the caller gets 0 back.

    Returns:
        Number of users updated (0 or 1)
    """
    return User.objects.filter(email=email).update(last_signin_time=timestamp)


def update_profile(
    *,
    email: str,
    name: Optional[str] = None,
    photo: Optional[str] = None
) -> int:
    """
    Update name and/or photo of a user.

    Only the supplied fields are written.

    Args:
        email: Email of the user to update
        name: New display name
        photo: New photo URL

    Returns:
        Number of users updated (0 or 1)

    Raises:
        InvalidProfileUpdateError: If email is missing or no field was supplied
    """
    if not email:
        raise InvalidProfileUpdateError("Email is required.")

    changes = {}
    if name:
        changes['name'] = name
    if photo:
        changes['photo'] = photo

    if not changes:
        raise InvalidProfileUpdateError("No fields to update.")

    return User.objects.filter(email=email).update(**changes)


def get_role(*, email: str) -> str:
    """
    Return the role of a user, ``participant`` when no role was ever set.

    Raises:
        UserNotFoundError: If no user has this email
    """
    user = User.objects.filter(email=email).only('role').first()
    if user is None:
        raise UserNotFoundError("User not found")

    return user.effective_role


@transaction.atomic
def set_role(*, email: str, role: str) -> User:
    """
    Grant or revoke the organizer role.

    Raises:
        InvalidRoleError: If role is not a known role
        UserNotFoundError: If no user has this email
    """
    if role not in Role.values:
        raise InvalidRoleError(
            f"Invalid role: '{role}'. Valid options: {', '.join(Role.values)}"
        )

    try:
        user = User.objects.select_for_update().get(email=email)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {email} not found")

    user.role = role
    user.save(update_fields=['role'])

    logger.info("Role of %s set to %s", email, role)
    return user
