import logging
from typing import Optional

from django.db.models import QuerySet

from apps.feedbacks.models import Feedback

from .exceptions import EmptyFeedbackError

logger = logging.getLogger(__name__)


def create_feedback(
    *,
    email: str,
    content: str,
    name: str = '',
    photo: str = '',
    rating: Optional[int] = None
) -> Feedback:
    """
    Store a feedback entry as submitted.

    Raises:
        EmptyFeedbackError: If content is blank
    """
    if not content or not content.strip():
        raise EmptyFeedbackError("Feedback content is required")

    feedback = Feedback.objects.create(
        email=email,
        name=name,
        photo=photo,
        rating=rating,
        content=content.strip(),
    )

    logger.info("Feedback %s created by %s", feedback.id, email)
    return feedback


def list_feedbacks() -> QuerySet[Feedback]:
    """All feedback, newest first."""
    return Feedback.objects.order_by('-created_at')
