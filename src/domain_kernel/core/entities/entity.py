"""Entity base class for domain-kernel.

An entity is compared by identity only. Two entities with the same
identifier are equal whatever their other state is, and the identifier
cannot be swapped after construction.
"""

from abc import ABC
from typing import Any, Generic, TypeVar

from ..value_objects import Identifier

ID = TypeVar('ID', bound=Identifier)

_IDENTITY_ATTRIBUTE = '_id'


class Entity(ABC, Generic[ID]):
    """Base class for objects defined by a persistent identifier."""

    def __init__(self, id: ID) -> None:
        self._id = id

    def __setattr__(self, name: str, value: Any) -> None:
        if name == _IDENTITY_ATTRIBUTE and _IDENTITY_ATTRIBUTE in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__} identity cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def id(self) -> ID:
        """The entity's identity."""
        return self._id

    def equals(self, other: 'Entity[ID]') -> bool:
        """Compare identities with the identifier's own equality."""
        return self._id.equals(other._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r})"
