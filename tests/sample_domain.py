"""Small domain model used across the test suite."""

from dataclasses import dataclass

from domain_kernel import (
    AggregateRoot,
    DomainEvent,
    Entity,
    Identifier,
    PrimitiveValueObject,
    UUIDIdentifier,
)


class UserId(Identifier[str]):
    pass


class TeamId(Identifier[str]):
    pass


class OrderId(UUIDIdentifier):
    pass


class Quantity(PrimitiveValueObject[int]):
    pass


class Ratio(PrimitiveValueObject[float]):
    pass


class Enabled(PrimitiveValueObject[bool]):
    pass


class Label(PrimitiveValueObject[str]):
    pass


@dataclass(frozen=True)
class UserRegisteredPayload:
    email: str


@dataclass(frozen=True)
class UserRenamedPayload:
    old_name: str
    new_name: str


@dataclass(frozen=True)
class OrderPlacedPayload:
    total_cents: int


class UserRegistered(DomainEvent[UserId, UserRegisteredPayload]):
    event_type = "user.registered"


class UserRenamed(DomainEvent[UserId, UserRenamedPayload]):
    event_type = "user.renamed"


class OrderPlaced(DomainEvent[OrderId, OrderPlacedPayload]):
    event_type = "order.placed"


class User(AggregateRoot[UserId]):
    """User aggregate raising events from its own transitions."""

    def __init__(self, id: UserId, name: str, email: str):
        super().__init__(id)
        self.name = name
        self.email = email

    @classmethod
    def register(cls, id: UserId, name: str, email: str) -> "User":
        user = cls(id, name, email)
        user._push_domain_event(UserRegistered(id, UserRegisteredPayload(email=email)))
        return user

    def rename(self, new_name: str) -> None:
        old_name = self.name
        self.name = new_name
        self._push_domain_event(
            UserRenamed(self.id, UserRenamedPayload(old_name=old_name, new_name=new_name))
        )


class Order(Entity[OrderId]):
    """Plain entity without events."""

    def __init__(self, id: OrderId, total_cents: int):
        super().__init__(id)
        self.total_cents = total_cents
