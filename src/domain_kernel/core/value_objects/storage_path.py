"""Storage path value object.

Represents a relative path inside a storage backend. The raw string is
kept exactly as given; it is only accepted if it is relative and cannot
escape its root.
"""

from typing import Any

from ..exceptions import (
    AbsoluteStoragePathError,
    DoubleSeparatorError,
    InvalidValueError,
    ParentReferenceError,
)
from .base import PrimitiveValueObject

PATH_SEPARATOR = "/"
PARENT_REFERENCE = ".."


class StoragePath(PrimitiveValueObject[str]):
    """Validated relative storage path.

    Rules are checked in order and the first violation is raised:
    no leading separator, no doubled separator, no ``..``.
    """

    __slots__ = ()

    @classmethod
    def create(cls, value: str) -> 'StoragePath':
        """Validate ``value`` and wrap it unchanged."""
        return cls(value)

    @classmethod
    def _validate(cls, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidValueError(
                f"Storage path must be a string, got {type(value).__name__}",
                details={"value_type": type(value).__name__}
            )

        if value.startswith(PATH_SEPARATOR):
            raise AbsoluteStoragePathError(
                f"Storage path should not start with {PATH_SEPARATOR}",
                details={"path": value, "rule": "leading_separator"}
            )

        if PATH_SEPARATOR * 2 in value:
            raise DoubleSeparatorError(
                "Storage path contains invalid double slashes",
                details={"path": value, "rule": "double_separator"}
            )

        if PARENT_REFERENCE in value:
            raise ParentReferenceError(
                f"Storage path cannot contain {PARENT_REFERENCE}",
                details={"path": value, "rule": "parent_reference"}
            )

    @property
    def extension(self) -> str:
        """Lowercased text after the last dot, empty when there is no dot."""
        _, dot, extension = self._value.rpartition('.')
        return extension.lower() if dot else ""

    def to_url(self, base_url: str) -> str:
        """Join ``base_url`` (trailing separators dropped) and this path."""
        return f"{base_url.rstrip(PATH_SEPARATOR)}{PATH_SEPARATOR}{self._value}"
