"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class InvalidProfileUpdateError(AccountsServiceError):
    """Raised when a profile update is missing its email or has nothing to update."""
    pass


class InvalidRoleError(AccountsServiceError):
    """Raised when a role value is not one of the known roles."""
    pass
