"""Domain protocols for domain-kernel.

Small capability contracts satisfied by the concrete domain types.
Entities, value objects and aggregates are checked against these instead
of a shared base class.
"""

from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class Equatable(Protocol):
    """Anything that can decide whether it equals another of its kind."""

    def equals(self, other: Any) -> bool:
        """Compare with another instance of the same kind."""
        ...


@runtime_checkable
class EventSource(Protocol):
    """Protocol for objects that buffer domain events until drained."""

    def pull_domain_events(self) -> List[Any]:
        """Return pending events in insertion order and forget them."""
        ...
