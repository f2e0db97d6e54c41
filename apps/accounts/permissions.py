"""
Access guard permission classes.

Every guarded view runs the same two checks in order:

1. identity - the request carries a credential the verifier accepted
   (missing credential -> 401, rejected credential -> 403)
2. role - for organizer-only views, the verified email must belong to a
   user whose role is ``organizer`` (unknown user or other role -> 403)

Usage:
    @api_view(['POST'])
    @permission_classes([IsOrganizer])
    def create_camp_view(request):
        ...
"""
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission

from .models import Role
from .services import get_role, UserNotFoundError


def is_organizer(identity) -> bool:
    """True if the verified identity belongs to an organizer."""
    if not getattr(identity, 'is_authenticated', False):
        return False
    try:
        return get_role(email=identity.email) == Role.ORGANIZER
    except UserNotFoundError:
        return False


class AccessGuard(BasePermission):
    """Identity verification followed by an optional role requirement."""

    required_role = None
    message = 'forbidden access'

    def has_permission(self, request, view):
        identity = request.user
        if not (identity and identity.is_authenticated):
            return False

        if self.required_role is None:
            return True

        try:
            return get_role(email=identity.email) == self.required_role
        except UserNotFoundError:
            return False


class IsVerifiedIdentity(AccessGuard):
    """Any caller with a verified credential."""
    pass


class IsOrganizer(AccessGuard):
    """Verified caller whose role is organizer."""
    required_role = Role.ORGANIZER


def scoped_email(request, requested_email=None):
    """
    Email filter a caller may use on per-user listings.

    Organizers may ask for anyone (``None`` meaning everyone). Everybody
    else only ever sees their own records.

    Raises:
        PermissionDenied: If a participant asks for someone else's records
    """
    identity = request.user
    if is_organizer(identity):
        return requested_email or None

    if requested_email and requested_email != identity.email:
        raise PermissionDenied('forbidden access')
    return identity.email


def ensure_owner_or_organizer(request, owner_email):
    """
    Raises:
        PermissionDenied: If the caller neither owns the record nor is an organizer
    """
    identity = request.user
    if identity.email == owner_email or is_organizer(identity):
        return
    raise PermissionDenied('forbidden access')
