"""Identifier parsing shared by the camp, registration and payment services."""

from uuid import UUID


def parse_uuid(value, *, error_class, label='ID') -> UUID:
    """
    Coerce a path/query/body value to a UUID.

    Raises:
        error_class: If the value is missing or not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise error_class(f"Invalid {label}")
