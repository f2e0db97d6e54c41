"""Camp listing service - full, paginated and popular listings."""

import math
from typing import Optional

from django.conf import settings
from django.db.models import QuerySet

from apps.camps.models import Camp

from .exceptions import InvalidPaginationError


def list_all_camps() -> QuerySet[Camp]:
    """All camps, newest first (organizer dashboard)."""
    return Camp.objects.order_by('-created_at')


def paginate_camps(*, page: int = 1, limit: Optional[int] = None) -> dict:
    """
    One page of camps ordered by creation time, newest first.

    Args:
        page: 1-based page number
        limit: Page size (defaults to CAMPS_PAGE_SIZE)

    Returns:
        dict with ``camps`` (list), ``total_pages``, ``current_page`` and
        ``total_count``

    Raises:
        InvalidPaginationError: If page or limit is not a positive integer
    """
    if limit is None:
        limit = settings.CAMPS_PAGE_SIZE

    if page < 1 or limit < 1:
        raise InvalidPaginationError("page and limit must be positive integers")

    total_count = Camp.objects.count()
    offset = (page - 1) * limit

    camps = list(Camp.objects.order_by('-created_at')[offset:offset + limit])

    return {
        'camps': camps,
        'total_pages': math.ceil(total_count / limit),
        'current_page': page,
        'total_count': total_count,
    }


def popular_camps(*, limit: Optional[int] = None) -> QuerySet[Camp]:
    """Top camps by participant count (defaults to POPULAR_CAMPS_LIMIT)."""
    if limit is None:
        limit = settings.POPULAR_CAMPS_LIMIT

    return Camp.objects.order_by('-participant_count', '-created_at')[:limit]
