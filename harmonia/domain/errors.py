"""Errors raised by application use cases.

Both derive from :class:`ValueError` so callers that only care about invalid
input keep working; the API layer maps each subclass to its HTTP status.
"""


class ResourceNotFoundError(ValueError):
    """The requested resource does not exist."""


class AccessDeniedError(ValueError):
    """The caller is not allowed to act on the requested resource."""


__all__ = ["AccessDeniedError", "ResourceNotFoundError"]
