"""Domain-Kernel - building blocks for domain models.

This library provides identity-compared entities, value-compared immutable
value objects, aggregate roots that buffer domain events, a registry of
event types and a validated storage path value object.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config import setup_logging_on_import
setup_logging_on_import()

from .core.exceptions import (
    # Base Exception
    KernelError,

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

from .core.shared import Equatable, EventSource

from .core.value_objects import (
    ValueObject,
    PrimitiveValueObject,
    Identifier,
    UUIDIdentifier,
    EventId,
    StoragePath,
)

from .core.entities import Entity, AggregateRoot

from .core.events import (
    DomainEvent,
    EventTypeEntry,
    EventTypeRegistry,
    default_registry,
    register_event_type,
)

__all__ = [
    "__version__",
    # Exceptions
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
    # Protocols
    "Equatable",
    "EventSource",
    # Value Objects
    "ValueObject",
    "PrimitiveValueObject",
    "Identifier",
    "UUIDIdentifier",
    "EventId",
    "StoragePath",
    # Entities
    "Entity",
    "AggregateRoot",
    # Events
    "DomainEvent",
    "EventTypeEntry",
    "EventTypeRegistry",
    "default_registry",
    "register_event_type",
]
