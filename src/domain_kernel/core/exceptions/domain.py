"""Domain-specific exceptions for domain-kernel.

Construction-time validation failures and event registry lookups.
"""

from .base import KernelError


# Validation Errors
class ValidationError(KernelError, ValueError):
    """Raised when a value object rejects its input at construction time."""
    pass


class InvalidValueError(ValidationError):
    """Raised when a wrapped value has the wrong type or format."""
    pass


class StoragePathError(ValidationError):
    """Base class for storage path rule violations."""
    pass


class AbsoluteStoragePathError(StoragePathError):
    """Raised when a storage path starts with the path separator."""
    pass


class DoubleSeparatorError(StoragePathError):
    """Raised when a storage path contains a doubled separator."""
    pass


class ParentReferenceError(StoragePathError):
    """Raised when a storage path contains a parent-directory reference."""
    pass


# Event Registry Errors
class EventRegistryError(KernelError):
    """Base class for event type registry errors."""
    pass


class DuplicateEventTypeError(EventRegistryError):
    """Raised when a tag is already bound to a different event class."""
    pass


class UnknownEventTypeError(EventRegistryError, LookupError):
    """Raised when no event class is registered for a tag."""
    pass
