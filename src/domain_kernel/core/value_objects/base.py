"""Base value objects for domain-kernel.

A value object wraps one immutable value and is compared by that value.
Instances are only produced after the class validation hook accepted the
input, whether they come from ``create`` or from the constructor.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, Union

from ..exceptions import InvalidValueError

T = TypeVar('T')
P = TypeVar('P', bound=Union[str, int, float, bool])


def primitive_kind(value: Any) -> Optional[str]:
    """Classify a primitive as ``boolean``, ``number`` or ``string``.

    Booleans are checked first because ``bool`` subclasses ``int``.
    Returns None for anything that is not a primitive.
    """
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


class ValueObject(ABC, Generic[T]):
    """Immutable wrapper around a single value.

    Subclasses decide what equality and the textual form mean by
    implementing ``equals`` and ``__str__``. Validation lives in the
    ``_validate`` hook, which runs before the value is stored.
    """

    __slots__ = ('_value',)

    def __init__(self, value: T) -> None:
        type(self)._validate(value)
        object.__setattr__(self, '_value', value)

    @classmethod
    def create(cls, value: T):
        """Validate ``value`` and wrap it."""
        return cls(value)

    @classmethod
    def _validate(cls, value: Any) -> None:
        """Reject invalid input by raising a ValidationError."""

    @property
    def value(self) -> T:
        """The wrapped value."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @abstractmethod
    def equals(self, other: 'ValueObject[T]') -> bool:
        """Compare by value with another value object of the same kind."""
        ...

    @abstractmethod
    def __str__(self) -> str:
        ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"


class PrimitiveValueObject(ValueObject[P]):
    """Value object over a single ``str``, ``int``, ``float`` or ``bool``.

    Equality is strict: both sides must be the same concrete class and
    wrap the same kind of primitive, so ``True`` never equals ``1`` and
    ``"1"`` never equals ``1``.
    """

    __slots__ = ()

    @classmethod
    def _validate(cls, value: Any) -> None:
        if primitive_kind(value) is None:
            raise InvalidValueError(
                f"{cls.__name__} must wrap a str, int, float or bool, got {type(value).__name__}",
                details={"value_type": type(value).__name__}
            )

    def equals(self, other: 'PrimitiveValueObject[P]') -> bool:
        if type(other) is not type(self):
            return False
        if primitive_kind(self._value) != primitive_kind(other._value):
            return False
        return self._value == other._value

    def __str__(self) -> str:
        if isinstance(self._value, bool):
            return "true" if self._value else "false"
        return str(self._value)

    def __hash__(self) -> int:
        return hash((self.__class__, primitive_kind(self._value), self._value))
