"""Value objects module for domain-kernel.

This module provides immutable value objects: the generic base classes,
identifiers and the storage path.
"""

from .base import ValueObject, PrimitiveValueObject, primitive_kind
from .identifiers import Identifier, UUIDIdentifier, EventId
from .storage_path import StoragePath, PATH_SEPARATOR

__all__ = [
    # Value objects framework
    "ValueObject",
    "PrimitiveValueObject",
    "primitive_kind",
    # Identifiers
    "Identifier",
    "UUIDIdentifier",
    "EventId",
    # Storage
    "StoragePath",
    "PATH_SEPARATOR",
]
