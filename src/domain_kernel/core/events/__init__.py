"""Domain events module for domain-kernel."""

from .domain_event import DomainEvent
from .registry import (
    EventTypeEntry,
    EventTypeRegistry,
    default_registry,
    event_shape,
    register_event_type,
)

__all__ = [
    "DomainEvent",
    "EventTypeEntry",
    "EventTypeRegistry",
    "default_registry",
    "event_shape",
    "register_event_type",
]
