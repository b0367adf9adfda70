"""Event type registry for domain-kernel.

Maps each event tag to the event class declared for it, together with the
aggregate identifier type and payload type taken from the class's
``DomainEvent[...]`` parameters. The table is open: any package can
register its own events, including the process-wide ``default_registry``.

Shapes are recorded for collaborators (publishers, serializers); the
registry never inspects a payload.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple, Type, TypeVar, get_args, get_origin

from ..exceptions import DuplicateEventTypeError, UnknownEventTypeError
from .domain_event import DomainEvent

E = TypeVar('E', bound=DomainEvent)

logger = logging.getLogger(__name__)


def event_shape(event_class: Type[DomainEvent[Any, Any]]) -> Tuple[Any, Any]:
    """Return ``(aggregate_id_type, payload_type)`` declared by an event class.

    Unbound type variables and unparameterised events resolve to ``Any``.
    """
    for klass in event_class.__mro__:
        for base in getattr(klass, '__orig_bases__', ()):
            if get_origin(base) is DomainEvent:
                return tuple(
                    Any if isinstance(arg, TypeVar) else arg
                    for arg in get_args(base)
                )
    return Any, Any


@dataclass(frozen=True)
class EventTypeEntry:
    """Registered shape of one event tag."""
    event_type: str
    event_class: Type[DomainEvent[Any, Any]]
    aggregate_id_type: Any
    payload_type: Any


class EventTypeRegistry:
    """Open table from event tag to event class and shapes."""

    def __init__(self) -> None:
        self._entries: Dict[str, EventTypeEntry] = {}

    def register(self, event_class: Type[E]) -> Type[E]:
        """Register an event class under its ``event_type``.

        Usable as a class decorator. Registering the same class twice is a
        no-op; binding an existing tag to another class fails.

        Raises:
            TypeError: If the class declares no ``event_type``
            DuplicateEventTypeError: If the tag belongs to another class
        """
        event_type = getattr(event_class, 'event_type', None)
        if not isinstance(event_type, str) or not event_type:
            raise TypeError(f"{event_class.__name__} must declare a non-empty event_type")

        existing = self._entries.get(event_type)
        if existing is not None:
            if existing.event_class is event_class:
                return event_class
            raise DuplicateEventTypeError(
                f"Event type '{event_type}' is already registered to {existing.event_class.__name__}",
                details={
                    "event_type": event_type,
                    "registered_class": existing.event_class.__qualname__,
                    "rejected_class": event_class.__qualname__,
                }
            )

        aggregate_id_type, payload_type = event_shape(event_class)
        self._entries[event_type] = EventTypeEntry(
            event_type=event_type,
            event_class=event_class,
            aggregate_id_type=aggregate_id_type,
            payload_type=payload_type,
        )
        logger.debug(f"Registered event type '{event_type}' -> {event_class.__qualname__}")
        return event_class

    def entry(self, event_type: str) -> EventTypeEntry:
        """Get the registered entry for a tag."""
        try:
            return self._entries[event_type]
        except KeyError:
            raise UnknownEventTypeError(
                f"No event class registered for '{event_type}'",
                details={"event_type": event_type}
            ) from None

    def get(self, event_type: str) -> Type[DomainEvent[Any, Any]]:
        """Get the event class registered for a tag."""
        return self.entry(event_type).event_class

    def create(self, event_type: str, aggregate_id: Any, payload: Any) -> DomainEvent[Any, Any]:
        """Build an event of the class registered for ``event_type``."""
        return self.get(event_type)(aggregate_id, payload)

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


# Default registry instance
default_registry = EventTypeRegistry()

# Convenience decorator using default registry
register_event_type = default_registry.register
