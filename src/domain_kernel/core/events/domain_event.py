"""Domain event base class for domain-kernel.

A domain event is an immutable fact raised by an aggregate. Concrete
events bind their tag and their shapes in the class statement:

    @dataclass(frozen=True)
    class UserRegisteredPayload:
        email: str

    class UserRegistered(DomainEvent[UserId, UserRegisteredPayload]):
        event_type = "user.registered"

A type checker then rejects ``UserRegistered(order_id, payload)``; nothing
inspects the payload at runtime.
"""

from dataclasses import dataclass, field
from datetime import datetime
from functools import total_ordering
from typing import Any, ClassVar, Generic, TypeVar

from ..value_objects import EventId
from ...utils import utc_now

AggregateIdT = TypeVar('AggregateIdT')
PayloadT = TypeVar('PayloadT')


@total_ordering
@dataclass(frozen=True, eq=False)
class DomainEvent(Generic[AggregateIdT, PayloadT]):
    """Immutable record of something that happened to an aggregate.

    ``id`` (UUIDv7) and ``occurred_at`` are assigned at construction and
    cannot be supplied by the caller. Events compare, hash and sort by
    ``id`` alone, which already follows creation order.
    """

    event_type: ClassVar[str]

    aggregate_id: AggregateIdT
    payload: PayloadT
    id: EventId = field(init=False, default_factory=EventId.generate)
    occurred_at: datetime = field(init=False, default_factory=utc_now)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'DomainEvent[Any, Any]':
        if not isinstance(getattr(cls, 'event_type', None), str):
            raise TypeError(f"{cls.__name__} declares no event_type and cannot be instantiated")
        return super().__new__(cls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainEvent):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DomainEvent):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)
