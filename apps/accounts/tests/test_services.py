"""
Service layer unit tests for accounts app.

Tests cover:
- Idempotent user creation
- Profile update rules
- Role lookup and assignment
"""

import pytest
from datetime import datetime, timezone as dt_timezone
from unittest.mock import patch
from django.db import IntegrityError

from apps.accounts.models import User, Role
from apps.accounts.services import (
    create_user_if_absent,
    touch_sign_in,
    update_profile,
    get_role,
    set_role,
)
from apps.accounts.services.exceptions import (
    UserNotFoundError,
    InvalidProfileUpdateError,
    InvalidRoleError,
)


@pytest.mark.django_db
class TestUserManagement:
    """Tests for user_management.py service functions."""

    def test_create_user_if_absent_creates(self):
        user, created = create_user_if_absent(email='a@example.com', name='A')

        assert created is True
        assert user.email == 'a@example.com'
        assert user.role is None

    def test_create_user_if_absent_is_idempotent(self, user):
        again, created = create_user_if_absent(email=user.email, name='Other')

        assert created is False
        assert again.pk == user.pk
        assert User.objects.filter(email=user.email).count() == 1

    def test_create_user_if_absent_lost_race(self, user):
        """A concurrent insert of the same email resolves to the existing row."""
        with patch.object(User.objects, 'filter') as mock_filter, \
                patch.object(User.objects, 'create', side_effect=IntegrityError):
            mock_filter.return_value.first.return_value = None
            again, created = create_user_if_absent(email=user.email)

        assert created is False
        assert again.pk == user.pk

    def test_touch_sign_in(self, user):
        ts = datetime(2025, 1, 14, 10, 30, tzinfo=dt_timezone.utc)

        assert touch_sign_in(email=user.email, timestamp=ts) == 1
        user.refresh_from_db()
        assert user.last_signin_time == ts

    def test_touch_sign_in_unknown_email(self, db):
        ts = datetime(2025, 1, 14, tzinfo=dt_timezone.utc)
        assert touch_sign_in(email='ghost@example.com', timestamp=ts) == 0

    def test_update_profile_requires_email(self):
        with pytest.raises(InvalidProfileUpdateError):
            update_profile(email='', name='x')

    def test_update_profile_requires_a_field(self, user):
        with pytest.raises(InvalidProfileUpdateError):
            update_profile(email=user.email)

    def test_update_profile_changes_only_supplied_fields(self, user):
        assert update_profile(email=user.email, name='Changed') == 1

        user.refresh_from_db()
        assert user.name == 'Changed'
        assert user.photo == 'https://example.com/test.png'


@pytest.mark.django_db
class TestRoles:
    """Tests for role lookup and assignment."""

    def test_get_role_defaults_to_participant(self, user):
        assert get_role(email=user.email) == Role.PARTICIPANT

    def test_get_role_organizer(self, organizer):
        assert get_role(email=organizer.email) == Role.ORGANIZER

    def test_get_role_unknown_user(self, db):
        with pytest.raises(UserNotFoundError):
            get_role(email='ghost@example.com')

    def test_set_role(self, user):
        set_role(email=user.email, role=Role.ORGANIZER)

        assert get_role(email=user.email) == Role.ORGANIZER

    def test_set_role_invalid(self, user):
        with pytest.raises(InvalidRoleError):
            set_role(email=user.email, role='admin')

    def test_set_role_unknown_user(self, db):
        with pytest.raises(UserNotFoundError):
            set_role(email='ghost@example.com', role=Role.ORGANIZER)
