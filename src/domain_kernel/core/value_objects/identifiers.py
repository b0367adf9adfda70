"""Value objects for identifiers in domain-kernel.

Each entity kind gets its own Identifier subclass, so a type checker
refuses to pass an order identifier where a user identifier is expected
even though both wrap a string:

    class UserId(Identifier[str]):
        pass

    class OrderId(UUIDIdentifier):
        pass

At runtime the subclasses also keep identifiers of different kinds
unequal, since primitive equality requires the same concrete class.
"""

import uuid
from datetime import datetime
from functools import total_ordering
from typing import Any, Optional, TypeVar, Union

from ..exceptions import InvalidValueError
from ...utils import extract_timestamp_from_uuid_v7, generate_uuid_v7, is_valid_uuid
from .base import PrimitiveValueObject

I = TypeVar('I', bound=Union[str, int])


class Identifier(PrimitiveValueObject[I]):
    """Entity identity wrapping a ``str`` or an ``int``."""

    __slots__ = ()

    @classmethod
    def _validate(cls, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise InvalidValueError(
                f"{cls.__name__} must wrap a str or int, got {type(value).__name__}",
                details={"value_type": type(value).__name__}
            )


@total_ordering
class UUIDIdentifier(Identifier[str]):
    """String identifier holding a UUID, ordered by the UUID's value.

    Identifiers from ``generate`` are UUIDv7, so ordering follows
    creation order within the process.
    """

    __slots__ = ()

    @classmethod
    def _validate(cls, value: Any) -> None:
        super()._validate(value)
        if not is_valid_uuid(value):
            raise InvalidValueError(
                f"{cls.__name__} must be a valid UUID, got: {value}",
                details={"value": value}
            )

    @classmethod
    def generate(cls):
        """Generate a new identifier using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    @property
    def timestamp(self) -> Optional[datetime]:
        """Creation moment embedded in a UUIDv7, None for other versions."""
        return extract_timestamp_from_uuid_v7(self._value)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return uuid.UUID(self._value) < uuid.UUID(other._value)


class EventId(UUIDIdentifier):
    """Domain event identifier."""

    __slots__ = ()
