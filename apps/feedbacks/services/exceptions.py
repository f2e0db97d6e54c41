"""Domain-specific exceptions for feedbacks app."""


class FeedbacksServiceError(Exception):
    """Base exception for all feedbacks service errors."""
    pass


class EmptyFeedbackError(FeedbacksServiceError):
    """Raised when feedback has no content."""
    pass
