"""Domain exceptions."""


class ResAccessError(Exception):
    """Base exception for ResAccess."""

    pass


class PermissionDenied(ResAccessError):
    """Identity is not allowed to perform the requested operation."""

    pass


class NotFound(ResAccessError):
    """Requested resource was not found."""

    pass


class ValidationError(ResAccessError):
    """Validation failed for input data."""

    pass
