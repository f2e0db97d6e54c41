from .exceptions import (
    FeedbacksServiceError,
    EmptyFeedbackError,
)

from .feedback_management import (
    create_feedback,
    list_feedbacks,
)


__all__ = [
    'FeedbacksServiceError',
    'EmptyFeedbackError',
    'create_feedback',
    'list_feedbacks',
]
