"""Exceptions module for domain-kernel."""

from .base import KernelError

from .domain import (
    # Validation Errors
    ValidationError,
    InvalidValueError,
    StoragePathError,
    AbsoluteStoragePathError,
    DoubleSeparatorError,
    ParentReferenceError,

    # Event Registry Errors
    EventRegistryError,
    DuplicateEventTypeError,
    UnknownEventTypeError,
)

__all__ = [
    "KernelError",
    "ValidationError",
    "InvalidValueError",
    "StoragePathError",
    "AbsoluteStoragePathError",
    "DoubleSeparatorError",
    "ParentReferenceError",
    "EventRegistryError",
    "DuplicateEventTypeError",
    "UnknownEventTypeError",
]
