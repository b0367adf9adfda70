"""Aggregate root base class for domain-kernel.

An aggregate root buffers the domain events raised by its own state
transitions until a persistence or publishing collaborator drains them.

The buffer is unbounded and unsynchronised. Whoever owns the aggregate
(typically one transaction) must keep pushes and the drain from running
concurrently on the same instance.
"""

import logging
from typing import TYPE_CHECKING, Any, List

from .entity import Entity, ID

if TYPE_CHECKING:
    from ..events import DomainEvent

logger = logging.getLogger(__name__)


class AggregateRoot(Entity[ID]):
    """Entity that accumulates pending domain events in insertion order."""

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: List['DomainEvent[Any, Any]'] = []

    @property
    def has_pending_events(self) -> bool:
        """Whether a drain would return anything."""
        return bool(self._domain_events)

    @property
    def pending_event_count(self) -> int:
        """Number of events waiting for the next drain."""
        return len(self._domain_events)

    def pull_domain_events(self) -> List['DomainEvent[Any, Any]']:
        """Return pending events in the order they were pushed and clear the buffer.

        The buffer is replaced in a single step, so each event is returned by
        exactly one drain.
        """
        events, self._domain_events = self._domain_events, []
        if events and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Drained {len(events)} domain event(s) from {self!r}")
        return events

    def _push_domain_event(self, event: 'DomainEvent[Any, Any]') -> None:
        """Append an event raised by one of this aggregate's own operations."""
        self._domain_events.append(event)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Recorded {event.event_type} ({event.id}) on {self!r}")
